"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""
import logging
import sys
from os import getcwd, makedirs
from os.path import join, dirname, exists


class PfcpLogger(logging.getLoggerClass()):
    def __init__(self, name: str = "openpfcp"):
        super().__init__(name)
        # handlers live here, records do not reach the root logger
        self.propagate = False
        self._name_to_level = logging.getLevelNamesMapping()
        self._stdout_hdlr = logging.StreamHandler(sys.stdout)
        self._file_hdlrs = []

        # init stdout with defaults
        self.set_stdout_levels()

    def _get_formatter(self, show_timestamp: bool, show_loglevel: bool, show_linenumber: bool):
        headers = []
        if show_loglevel:
            headers.append("%(levelname)-5s")
        if show_timestamp:
            headers.append("%(asctime)s")
        h_fmt = ",".join(headers)

        m_fmt = "%(message)s"
        if show_linenumber:
            m_fmt += " (%(filename)s:%(lineno)d)"

        if h_fmt:
            return logging.Formatter(h_fmt + " | " + m_fmt)
        return logging.Formatter(m_fmt)

    def add_log_level(self, level_name: str, level_num: int):
        method_name = level_name.lower()

        def log(self, message, *args, **kwargs):
            if self.isEnabledFor(level_num):
                self._log(level_num, message, args, **kwargs)

        logging.addLevelName(level_num, level_name)
        setattr(logging.getLoggerClass(), method_name, log)
        self._name_to_level = logging.getLevelNamesMapping()

    def get_level_names(self):
        return list(self._name_to_level.keys())

    def set_stdout_levels(
        self,
        loglevel: str = "INFO",
        show_timestamp: bool = False,
        show_loglevel: bool = False,
        show_linenumber: bool = False,
    ):
        formatter = self._get_formatter(show_timestamp, show_loglevel, show_linenumber)
        self.removeHandler(self._stdout_hdlr)
        self._stdout_hdlr.setLevel(self._name_to_level[loglevel])
        self._stdout_hdlr.setFormatter(formatter)
        self.addHandler(self._stdout_hdlr)
        self._update_level()

    def set_stdout_level(self, loglevel: str):
        # keeps the current stdout format
        self._stdout_hdlr.setLevel(self._name_to_level[loglevel])
        self._update_level()

    def get_stdout_level(self) -> int:
        return self._stdout_hdlr.level

    def create_log_file(
        self,
        filename: str,
        loglevel: str = "DEBUG",
        show_timestamp: bool = False,
        show_loglevel: bool = False,
        show_linenumber: bool = False,
    ):
        # Create log directory
        filepath = join(getcwd(), filename)
        log_dir = dirname(filepath)
        if not exists(log_dir):
            makedirs(log_dir)

        formatter = self._get_formatter(show_timestamp, show_loglevel, show_linenumber)
        file_handler = logging.FileHandler(filepath)
        file_handler.setLevel(self._name_to_level[loglevel])
        file_handler.setFormatter(formatter)
        self.addHandler(file_handler)
        self._file_hdlrs.append(file_handler)
        self._update_level()

    def close_log_files(self):
        for hdlr in self._file_hdlrs:
            self.removeHandler(hdlr)
            hdlr.close()
        self._file_hdlrs = []
        self._update_level()

    def _update_level(self):
        # the logger passes records down to the most verbose handler
        self.setLevel(min(h.level for h in self.handlers))

    def hexdump(self, loglevel, data, *args, **kwargs):
        level = self._name_to_level[loglevel]
        if not self.isEnabledFor(level):
            return
        data = bytes(data)
        for addr in range(0, max(len(data), 1), 0x10):
            d = data[addr : addr + 0x10]
            # non-printable ascii values to '.'
            data_ascii = "".join([chr(b) if (b > 32 and b < 127) else "." for b in d])
            data_bytes = d.hex(sep=" ")
            line = f"{addr:04x}:  {data_bytes:47}  |{data_ascii:16}|"
            self._log(level, line, args, **kwargs)


# initialize logger and add log-level "TRACE"
_default_logger_class = logging.getLoggerClass()
logging.setLoggerClass(PfcpLogger)
logger = logging.getLogger("openpfcp")
logging.setLoggerClass(_default_logger_class)
TRACE = logging.DEBUG - 5
logger.add_log_level("TRACE", TRACE)
