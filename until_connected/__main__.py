from until_connected import main

if __name__ == "__main__":
    main.until_connected_cli()
