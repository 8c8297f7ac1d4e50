"""Entry point: python -m services.console"""

import logging

from services.console.console import Console


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    console = Console()
    logging.getLogger(__name__).info(
        "World ready with %d resources. Type 'quit' to stop.",
        console.world.resource_count(),
    )
    console.run()


if __name__ == "__main__":
    main()
