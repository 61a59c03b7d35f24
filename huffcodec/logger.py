"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import Any, Union, Optional

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class FrequencyCountLog(Log):
    def __init__(self, distinct: int, total: int) -> None:
        self.distinct = distinct
        self.total = total
        super().__init__("Frequency_count_log", LogLevel.INFO, f"Distinct symbols: {distinct}, Total symbols: {total}")


class MergeLog(Log):
    def __init__(self, left_frequency: int, right_frequency: int) -> None:
        self.left_frequency = left_frequency
        self.right_frequency = right_frequency
        self.frequency = left_frequency + right_frequency
        super().__init__("Merge_log", LogLevel.INFO,
                         f"Left: {left_frequency}, Right: {right_frequency}, Merged: {self.frequency}")


class CodeAssignedLog(Log):
    def __init__(self, symbol: Any, code: str) -> None:
        self.symbol = symbol
        self.code = code
        super().__init__("Code_assigned_log", LogLevel.INFO, f"Symbol: {symbol!r}, Code: {code}")


class CodingLog(Log):
    def __init__(self, symbol_count: int, encoded_bits: int) -> None:
        self.symbol_count = symbol_count
        self.encoded_bits = encoded_bits
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol count: {symbol_count}, Encoded bits: {encoded_bits}")


class ErrorLog(Log):
    def __init__(self, message: str) -> None:
        super().__init__("Error_log", LogLevel.ERROR, message)


class MergeProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Merge_progress_step", LogLevel.PROGRESS, message)


class CodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Coding_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.merge_progress_count = 0
        self.coding_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.save_info = True
        self.save_warning = True
        self.save_error = True
        self.save_progress = False

        self.merge_step_interval_count = 1000
        self.coding_step_interval_count = 10000

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, MergeProgressStep):
                self.merge_progress_count += 1
                count = self.merge_progress_count
                interval = self.merge_step_interval_count
            elif isinstance(log, CodingProgressStep):
                self.coding_progress_count += 1
                count = self.coding_progress_count
                interval = self.coding_step_interval_count
            else:
                raise ValueError(f"Unsupported progress log: {log.type_name}")
            if log.total_steps is not None:
                log.message = f"{log.base_message} ({count}/{log.total_steps})"
            else:
                log.message = f"{log.base_message} ({count})"
            if self.record_progress:
                self.logs.append(log)
            if self.display_progress and (count % interval == 0):
                print(log)

    def reset_merge_progress(self) -> None:
        self.merge_progress_count = 0

    def reset_coding_progress(self) -> None:
        self.coding_progress_count = 0

    def reset_progress(self) -> None:
        self.reset_merge_progress()
        self.reset_coding_progress()

    def _should_save(self, log: Log) -> bool:
        if log.level == LogLevel.INFO:
            return self.save_info
        if log.level == LogLevel.WARNING:
            return self.save_warning
        if log.level == LogLevel.ERROR:
            return self.save_error
        return self.save_progress

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                if self._should_save(log):
                    file.write(str(log) + "\n")
