"""Interactive demonstration of the logger."""

from __future__ import annotations

import argparse

from qlogger.logger import DEFAULT_TEMPLATE, Logger, LogLevel, OutputTarget

_TARGETS = {
    1: OutputTarget.CONSOLE,
    2: OutputTarget.FILE,
    3: OutputTarget.BOTH,
    4: OutputTarget.CONSOLE,
}

_TEMPLATES = {
    1: DEFAULT_TEMPLATE,
    2: "[{L}] {m}",
    3: "{t} - {m}",
    4: "{m} ({f}:{l})",
}

CUSTOM_TEMPLATES_CHOICE = 4


def choose_target(choice: int) -> OutputTarget | None:
    """Map a menu number to an output target, or None if it is not on the menu."""
    return _TARGETS.get(choice)


def choose_template(choice: int) -> str:
    """Map a menu number to a format template, falling back to the default."""
    return _TEMPLATES.get(choice, DEFAULT_TEMPLATE)


def _read_choice(prompt: str) -> int:
    try:
        raw = input(prompt)
    except EOFError:
        return 0
    try:
        return int(raw.strip())
    except ValueError:
        return 0


def _run_demo(logger: Logger) -> None:
    logger.init(LogLevel.TRACE, "app_log.log", True, True)
    logger.level = LogLevel.TRACE

    logger.trace("Trace message: start app")
    logger.debug("Debug message: value x = ", 123)
    logger.info("Info message: user login")
    logger.warning("Warning message: low data")
    logger.error("Error message: error - cant open file ", "config.txt")
    logger.critical("Critical message: system error!")
    logger.flush()

    logger.init(LogLevel.DEBUG, "fixed_name_log.log", True, False)
    logger.level = LogLevel.DEBUG

    logger.debug("Debug message posle smeni loga")
    logger.info("Info message s neskolkimi parametrami: ", 3.14, ", string ", "primer")

    user = "Alice"
    error_code = -404
    logger.error("User error ", user, " with code ", error_code)
    logger.flush()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="qlogger", description="Write demonstration messages through the logger."
    )
    parser.add_argument("--target", type=int, help="output choice 1-4 (asked if omitted)")
    parser.add_argument("--template", type=int, help="template choice 1-4 (asked if omitted)")
    args = parser.parse_args(argv)

    with Logger() as logger:
        choice = args.target
        if choice is None:
            choice = _read_choice(
                "Куда выводить лог? (1 - консоль, 2 - файл, 3 - оба, "
                "4 - пользовательские шаблоны): "
            )
        target = choose_target(choice)
        if target is None:
            print("Неверный выбор. Используется вывод в консоль.")
            target = OutputTarget.CONSOLE
        logger.target = target

        if choice == CUSTOM_TEMPLATES_CHOICE:
            template_choice = args.template
            if template_choice is None:
                print("Выберите шаблон лога:")
                for number, template in _TEMPLATES.items():
                    print(f"{number}: {template}")
                template_choice = _read_choice("Введите номер шаблона (1-4): ")
            logger.format_template = choose_template(template_choice)

        _run_demo(logger)
    print("Завершение программы.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())