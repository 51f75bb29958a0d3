"""Run the lookup driver with ``python -m lutinterp``."""

from .driver import main as driver_main


def main() -> None:
    """Entry point for ``python -m lutinterp``."""
    raise SystemExit(driver_main())


if __name__ == "__main__":
    main()
