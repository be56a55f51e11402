"""
Unit test file.
"""

import logging
import tempfile
import unittest
from pathlib import Path

from s3_multipart_upload.log import configure_logging


class ConfigureLoggingTester(unittest.TestCase):
    """Test the logging setup used by the console entry point."""

    def tearDown(self) -> None:
        configure_logging()

    def test_default_level(self) -> None:
        self.assertEqual(configure_logging(), logging.INFO)
        self.assertEqual(logging.root.level, logging.INFO)

    def test_verbose_keeps_client_libraries_quiet(self) -> None:
        self.assertEqual(configure_logging(verbose=True), logging.DEBUG)
        self.assertEqual(logging.root.level, logging.DEBUG)
        self.assertEqual(logging.getLogger("botocore").level, logging.INFO)
        self.assertEqual(logging.getLogger("urllib3").level, logging.INFO)

    def test_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "logs" / "upload.log"
            configure_logging(log_file=log_file)
            logging.getLogger("s3_multipart_upload.test").info("part 3 uploaded")
            configure_logging()  # closes the file handler
            self.assertIn("part 3 uploaded", log_file.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
