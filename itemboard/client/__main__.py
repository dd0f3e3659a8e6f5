# itemboard/client/__main__.py

from itemboard.client.cli import main

if __name__ == "__main__":
    main()
