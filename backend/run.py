from letterbank.cli import main

if __name__ == '__main__':
    # Terminal game plus the viewer listener on LISTEN_PORT
    main()
