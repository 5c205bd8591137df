"""
``python -m methdev`` and the ``methdev`` console script.
"""


def main(argv: list[str] | None = None) -> None:
    from .cli import cli

    # prog_name keeps usage lines reading "methdev" under python -m
    cli.main(args=argv, prog_name="methdev")


if __name__ == "__main__":
    main()
