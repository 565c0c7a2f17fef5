import PyInstaller.__main__


def main() -> None:
    PyInstaller.__main__.run(
        ["--onefile", "elearning_cli/main.py", "--name", "elearning"]
    )


if __name__ == "__main__":
    main()
