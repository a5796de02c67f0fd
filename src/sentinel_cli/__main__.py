from sentinel_cli.menu import main

if __name__ == "__main__":
    raise SystemExit(main())
