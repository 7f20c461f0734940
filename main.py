"""
Stream creation demo: builds a stream from every kind of source and prints
its elements, one per line, under a header for each technique.
"""

import sys
from typing import Callable, List, Optional

import creation
from models import DemoSection, DemoSettings
from utils import get_logger, setup_logging

logger = get_logger("main")

EMPTY_MESSAGE = "Stream created using empty() method. (Size will be 0): Size :"


def square(n):
    return n * n


def run_demo(settings: Optional[DemoSettings] = None,
             out: Callable[[str], None] = print) -> List[DemoSection]:
    """Run every demonstration in order, writing each line through `out`."""
    settings = settings or DemoSettings()
    sections: List[DemoSection] = []

    def show(title, stream):
        section = DemoSection(title=title)
        out(section.header)
        stream.for_each(lambda item: _emit(section, str(item), out))
        sections.append(section)

    show("Creating Stream from specified Values", creation.from_values(*settings.values))

    show("Creating Stream from Collection", creation.from_collection(list(settings.values)))

    show("Creating Stream from Array", creation.from_array(tuple(settings.array)))

    show("Creating Stream Using Stream.of() Method", creation.of_array(tuple(settings.array)))

    section = DemoSection(title="Creating Stream Using Stream.empty() Method")
    out(section.header)
    _emit(section, f"{EMPTY_MESSAGE}{creation.empty().count()}", out)
    sections.append(section)

    stream_builder = creation.builder()
    for value in settings.values:
        stream_builder.add(value)
    show("Creating Stream Using Stream.builder() Method", stream_builder.build())

    show(
        "Creating infinite Stream Using Stream.iterate()",
        creation.iterate(settings.iterate_seed, square, settings.iterate_limit),
    )

    show(
        "Creating Stream Using Stream.generate()",
        creation.generate(creation.random_supplier(settings.random_seed), settings.generate_limit),
    )

    show(
        "Creating Stream from a Pattern using Predicate",
        creation.from_pattern(settings.fruits, settings.pattern),
    )

    show("Creating Stream Using Iterator", creation.from_iterator(iter(settings.fruits)))

    show("Creating Stream Using Iterable", creation.from_iterable(settings.fruits))

    logger.info(f"Demo finished: {len(sections)} sections")
    return sections


def _emit(section, line, out):
    section.lines.append(line)
    out(line)


def main() -> int:
    settings = DemoSettings.from_env()
    setup_logging(settings.log_level)
    logger.info("Running stream creation demo")
    run_demo(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
