import logging
import unittest

from i18n_classgen.diagnostics import ERROR, NOTE, WARNING, Diagnostic, Diagnostics


class TestDiagnostics(unittest.TestCase):
    def test_collects_by_kind(self):
        diagnostics = Diagnostics()
        diagnostics.note("generating")
        diagnostics.warn("blank", "Messages.i18n_fr.properties")
        diagnostics.error("unreadable")

        self.assertEqual([d.kind for d in diagnostics.entries], [NOTE, WARNING, ERROR])
        self.assertEqual([str(d) for d in diagnostics.warnings], ["Messages.i18n_fr.properties: blank"])
        self.assertEqual(len(diagnostics.errors), 1)

    def test_drain_resets(self):
        diagnostics = Diagnostics()
        diagnostics.warn("blank")
        self.assertEqual(diagnostics.drain(), [Diagnostic(WARNING, "blank")])
        self.assertEqual(diagnostics.entries, [])

    def test_drain_to_logs_with_matching_levels(self):
        diagnostics = Diagnostics()
        diagnostics.note("generating")
        diagnostics.warn("blank")
        diagnostics.error("unreadable")
        logger = logging.getLogger("i18n_classgen.test")

        with self.assertLogs(logger, level="INFO") as captured:
            drained = diagnostics.drain_to(logger)

        self.assertEqual(len(drained), 3)
        self.assertEqual([r.levelno for r in captured.records], [logging.INFO, logging.WARNING, logging.ERROR])
        self.assertEqual(diagnostics.entries, [])


if __name__ == '__main__':
    unittest.main()
