# qlogger

A small logger that writes messages from a background thread. It can write to the console, to a file, or to both. Each message is laid out by a template that you can change.

## Install

```
pip install .
```

## Use

```python
from qlogger.logger import Logger, LogLevel, OutputTarget

with Logger() as log:
    log.target = OutputTarget.BOTH
    log.init(LogLevel.DEBUG, "logs/app.log", append=True, add_timestamp_suffix=True)
    log.info("user ", "Alice", " logged in with code ", 42)
    log.trace("dropped: below DEBUG")
    log.log(LogLevel.ERROR, "cannot open config.txt", "main.py", 17)
```

- `Logger(console=None)` writes console output to `sys.stdout`, or to the text stream you pass as `console`.
- The attributes `level` (minimum `LogLevel`, default `TRACE`), `target` (`OutputTarget.CONSOLE`, `FILE` or `BOTH`, default `CONSOLE`) and `format_template` can be set at any time.
- `init(level, file_path, append=True, add_timestamp_suffix=True)` sets the minimum level, creates any missing parent directories and opens the file, closing any file opened before. With `add_timestamp_suffix`, the time the logger was created is put before the last extension, so `app.log` becomes `app_2024-01-31_12-00-00.log` (see `timestamped_path`). A new or empty file gets a UTF-8 byte-order mark. The path in use is kept in `file_path`.
- `log(level, message, file, line)` queues one message; messages below `level` are dropped.
- `trace`, `debug`, `info`, `warning`, `error`, `critical` and `log_args(level, *args)` join their arguments with `str()` into one message and record the file and line they were called from.
- Console lines are prefixed with `[Console] `. When writing to the file, the logger also prints to the console the file path and the number of UTF-8 bytes written, or a notice if no file has been opened.
- `flush()` waits until every queued message has been written. `close()`, or leaving the `with` block, writes what is left, stops the worker thread and closes the file. Logging after `close()` raises `RuntimeError`.

### Templates

The template placeholders are `{t}` (timestamp, `YYYY-MM-DD HH:MM:SS`), `{L}` (level name), `{f}` (file), `{l}` (line) and `{m}` (message). The default template is:

```
{t} | {L} | {f}:{l} -> {m}
```

`format_record(template, record)` fills a template for a single `LogRecord`; `Logger.format_message(record)` does the same with the logger's current template.

### Shared logger

`default_logger()` returns one logger for the whole process, closed automatically at exit. The module-level `trace`, `debug`, `info`, `warning`, `error` and `critical` functions in `qlogger.logger` write to it.

## Demo

```
qlogger-demo
```

The demo asks where the log should go: 1 for the console, 2 for a file, 3 for both, or 4 for the console with a template you pick from four. Any other answer falls back to the console. It then writes sample messages to `app_log_<startup time>.log` and `fixed_name_log.log` in the current directory.

The questions can be answered on the command line instead:

```
qlogger-demo --target 4 --template 2
```