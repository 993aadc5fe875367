# greeter/__main__.py
from greeter.main import serve


def main() -> None:
    serve()


if __name__ == "__main__":
    main()
