"""Print the predefined typed test suites: ``python -m tensorparam``."""

from . import __version__
from .config import get_config
from .suites import list_suites


def main():
    seed = get_config().seed
    print("=" * 60)
    print(f"tensorparam {__version__} (seed: {seed if seed is not None else 'random'})")
    print("=" * 60)
    for name, params in list_suites().items():
        print(f"\n{name} ({len(params)} params):")
        for p in params:
            print(f"  {p}")


if __name__ == "__main__":
    main()
