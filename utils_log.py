# FILE: utils_log.py
# Receptori ("sinks") pentru evenimentele de diagnostic ale neuronului.
# Orice obiect cu metoda record(event, fields) poate fi folosit.

import logging
import sys

import pandas as pd

LOGGER_NAME = "perceptron"

# handler-ul adaugat de configure_logging, o singura data
_stdout_handler = None

# evenimente raportate la nivel ERROR, restul merg pe DEBUG
ERROR_EVENTS = ("accuracy_length_mismatch",)


def configure_logging(level="INFO"):
    """
    Trimite log-urile pe stdout (nu pe stderr) cu nivelul dat.
    Intoarce logger-ul configurat.
    """
    global _stdout_handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if _stdout_handler is None:
        _stdout_handler = logging.StreamHandler(sys.stdout)
        _stdout_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    if _stdout_handler not in logger.handlers:
        logger.addHandler(_stdout_handler)

    return logger


def _format_fields(fields):
    parts = []
    for key, value in fields.items():
        if hasattr(value, "tolist"):
            value = value.tolist()
        parts.append(f"{key}={value}")
    return " ".join(parts)


class NullSink:
    def record(self, event, fields):
        pass


class LoggingSink:
    def __init__(self, logger=None):
        self.logger = logger if logger is not None else logging.getLogger(LOGGER_NAME)

    def record(self, event, fields):
        level = logging.ERROR if event in ERROR_EVENTS else logging.DEBUG
        if self.logger.isEnabledFor(level):
            self.logger.log(level, "%s %s", event, _format_fields(fields))


class HistorySink:
    """
    Pastreaza evenimentele in memorie, in ordinea sosirii.
    frame(event) le intoarce ca DataFrame, util pentru ploturi (ex. eroarea pe epoca).
    """

    def __init__(self):
        self.events = []

    def record(self, event, fields):
        self.events.append((event, dict(fields)))

    def of(self, event):
        return [fields for name, fields in self.events if name == event]

    def frame(self, event):
        return pd.DataFrame(self.of(event))

    def clear(self):
        self.events.clear()


NULL_SINK = NullSink()
