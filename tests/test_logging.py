import json
import logging
import sys
import unittest

from inventario.config import Settings
from inventario.core.logging import JsonFormatter, build_handler, setup_logging


def _record(message, *args, exc_info=None, **extra):
    record = logging.LogRecord("inventario.test", logging.INFO, __file__, 1, message, args, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class JsonFormatterTest(unittest.TestCase):
    def test_emits_one_json_object(self):
        line = JsonFormatter().format(_record("Venta %s registrada", 7))
        payload = json.loads(line)

        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["logger"], "inventario.test")
        self.assertEqual(payload["message"], "Venta 7 registrada")
        self.assertIn("timestamp", payload)

    def test_keeps_non_ascii_text(self):
        line = JsonFormatter().format(_record("Camión añadido"))
        self.assertIn("Camión añadido", line)

    def test_extra_fields_are_included(self):
        payload = json.loads(JsonFormatter().format(_record("ok", sale_id=3, line_items=2)))

        self.assertEqual(payload["sale_id"], 3)
        self.assertEqual(payload["line_items"], 2)
        self.assertNotIn("args", payload)
        self.assertNotIn("msg", payload)

    def test_exception_text_is_attached(self):
        try:
            raise RuntimeError("fallo")
        except RuntimeError:
            record = _record("error", exc_info=sys.exc_info())
        payload = json.loads(JsonFormatter().format(record))

        self.assertIn("RuntimeError: fallo", payload["exc_info"])


class SetupLoggingTest(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))

    def tearDown(self):
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers[:] = self._saved[1]

    def test_handler_formatter_follows_settings(self):
        self.assertIsInstance(build_handler(Settings(LOG_JSON=True)).formatter, JsonFormatter)
        self.assertNotIsInstance(build_handler(Settings(LOG_JSON=False)).formatter, JsonFormatter)

    def test_setup_installs_single_root_handler(self):
        setup_logging(Settings(LOG_LEVEL="warning", LOG_JSON=True))
        root = logging.getLogger()

        self.assertEqual(root.level, logging.WARNING)
        self.assertEqual(len(root.handlers), 1)
        self.assertIsInstance(root.handlers[0].formatter, JsonFormatter)
        self.assertTrue(logging.getLogger("uvicorn.access").propagate)
        self.assertEqual(logging.getLogger("uvicorn.access").handlers, [])


if __name__ == "__main__":
    unittest.main()
