from salt_state import main

if __name__ == "__main__":
    main()
