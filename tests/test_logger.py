import logging
import unittest

from pyattitude.logger import (
    ColoredFormatter, LogContext, LogLevel, setup_logger
)


class TestLogLevel(unittest.TestCase):

    def test_from_name(self):
        self.assertIs(LogLevel.from_name("debug"), LogLevel.DEBUG)
        self.assertEqual(LogLevel.from_name("TRACE").value, 5)
        with self.assertRaises(ValueError):
            LogLevel.from_name("LOUD")

    def test_trace_level_registered(self):
        self.assertEqual(logging.getLevelName(5), "TRACE")
        self.assertTrue(hasattr(logging.getLogger("pyattitude.test"), "trace"))


class TestSetupLogger(unittest.TestCase):

    def tearDown(self):
        for name in ("pyattitude.test_setup",):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

    def test_console_handler(self):
        logger = setup_logger("pyattitude.test_setup", "DEBUG")
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0].formatter, ColoredFormatter)

    def test_repeated_setup_replaces_handlers(self):
        setup_logger("pyattitude.test_setup", "INFO")
        logger = setup_logger("pyattitude.test_setup", "WARNING")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.WARNING)

    def test_file_handler(self):
        import os
        import tempfile

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "attitude.log")
            logger = setup_logger("pyattitude.test_setup", "INFO", log_file=path, console=False)
            logger.info("written to file")
            for handler in logger.handlers:
                handler.flush()
            with open(path, encoding="utf-8") as fh:
                self.assertIn("written to file", fh.read())
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

    def test_colored_formatter_keeps_record(self):
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        text = ColoredFormatter('%(levelname)s %(message)s').format(record)
        self.assertIn("\033[31mERROR", text)
        self.assertEqual(record.levelname, "ERROR")

    def test_log_context(self):
        logger = logging.getLogger("pyattitude.test_setup")
        logger.setLevel(logging.WARNING)
        with LogContext(logger, "TRACE") as ctx:
            self.assertIs(ctx, logger)
            self.assertEqual(logger.level, 5)
        self.assertEqual(logger.level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
