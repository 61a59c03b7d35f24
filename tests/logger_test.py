#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from huffcodec.logger import Logger, Log, LogLevel, MergeLog, MergeProgressStep, CodingProgressStep

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].type_name, "General")
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is a warning", self.captured_output.getvalue())

    def test_error_logging(self):
        error_log = Log("ErrorTest", LogLevel.ERROR, "This is an error")
        self.logger.log(error_log)
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is an error", self.captured_output.getvalue())

    def test_progress_counting(self):
        self.logger.merge_step_interval_count = 2
        for _ in range(3):
            self.logger.log(MergeProgressStep("Merging nodes", 3))
        self.logger.log(CodingProgressStep("Encoding symbols"))
        self.assertEqual(self.logger.merge_progress_count, 3)
        self.assertEqual(self.logger.coding_progress_count, 1)
        self.assertEqual(len(self.logger.logs), 0)
        printed = self.captured_output.getvalue()
        self.assertIn("Merging nodes (2/3)", printed)
        self.assertNotIn("(1/3)", printed)
        self.logger.reset_merge_progress()
        self.assertEqual(self.logger.merge_progress_count, 0)
        self.assertEqual(self.logger.coding_progress_count, 1)
        self.logger.reset_progress()
        self.assertEqual(self.logger.merge_progress_count, 0)
        self.assertEqual(self.logger.coding_progress_count, 0)

    def test_unsupported_progress_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(Log("Other", LogLevel.PROGRESS, "step"))

    def test_save(self):
        self.logger.log(MergeLog(1, 2))
        self.logger.log(Log("WarningTest", LogLevel.WARNING, "skipped"))
        self.logger.save_warning = False
        with tempfile.NamedTemporaryFile(delete=False) as temp_file:
            temp_file_name = temp_file.name
        try:
            self.logger.save(temp_file_name)
            with open(temp_file_name) as f:
                lines = f.read().splitlines()
            self.assertEqual(len(lines), 1)
            self.assertIn("Merged: 3", lines[0])
        finally:
            os.remove(temp_file_name)

if __name__ == '__main__':
    unittest.main()
