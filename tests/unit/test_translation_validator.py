import unittest

from i18n_classgen.diagnostics import Diagnostics
from i18n_classgen.message_interface import Method
from i18n_classgen.translation_validator import validate_translations

GREET = Method("org.example.Messages", "greet", translation_key="greet")
FAREWELL = Method("org.example.Messages", "farewell", translation_key="bye")
LEGAL = [GREET, FAREWELL]


class TestValidateTranslations(unittest.TestCase):
    def setUp(self):
        self.diagnostics = Diagnostics()

    def test_valid_translation_is_kept(self):
        result = validate_translations(LEGAL, {'greet': 'Bonjour'}, self.diagnostics)
        self.assertEqual(result, {GREET: 'Bonjour'})
        self.assertEqual(self.diagnostics.warnings, [])

    def test_missing_key_is_silent(self):
        result = validate_translations(LEGAL, {}, self.diagnostics)
        self.assertEqual(result, {})
        self.assertEqual(self.diagnostics.entries, [])

    def test_blank_value_is_dropped_with_one_warning(self):
        result = validate_translations(LEGAL, {'greet': '  \t', 'bye': 'Au revoir'}, self.diagnostics, "Messages.i18n_fr.properties")
        self.assertEqual(result, {FAREWELL: 'Au revoir'})
        self.assertEqual(len(self.diagnostics.warnings), 1)
        warning = self.diagnostics.warnings[0]
        self.assertIn("blank value for key greet", warning.message)
        self.assertEqual(warning.source, "Messages.i18n_fr.properties")

    def test_orphan_key_warns_once(self):
        result = validate_translations(LEGAL, {'greet': 'Bonjour', 'unknownKey': 'X'}, self.diagnostics)
        self.assertEqual(result, {GREET: 'Bonjour'})
        self.assertEqual([w.message for w in self.diagnostics.warnings],
                         ["orphan translation key: no method declares key unknownKey"])

    def test_value_is_not_trimmed(self):
        result = validate_translations(LEGAL, {'greet': ' Bonjour '}, self.diagnostics)
        self.assertEqual(result[GREET], ' Bonjour ')

    def test_method_name_is_not_the_key(self):
        # farewell is translated through its key "bye", never through its name
        result = validate_translations(LEGAL, {'farewell': 'Au revoir'}, self.diagnostics)
        self.assertEqual(result, {})
        self.assertEqual(len(self.diagnostics.warnings), 1)

    def test_result_key_set_is_intersection_of_legal_and_non_blank_keys(self):
        raw = {'greet': 'Bonjour', 'bye': ' ', 'extra': 'x', 'other': ''}
        result = validate_translations(LEGAL, raw, self.diagnostics)
        self.assertEqual({m.translation_key for m in result}, {'greet'})
        # one blank warning plus two orphans, blank orphans included
        self.assertEqual(len(self.diagnostics.warnings), 3)

    def test_independent_of_raw_ordering(self):
        raw = {'zeta': '1', 'greet': 'Bonjour', 'alpha': '2', 'bye': ''}
        first = validate_translations(LEGAL, raw, self.diagnostics)
        first_warnings = [w.message for w in self.diagnostics.drain()]

        reordered = dict(reversed(list(raw.items())))
        second = validate_translations(list(reversed(LEGAL)), reordered, self.diagnostics)
        second_warnings = [w.message for w in self.diagnostics.drain()]

        self.assertEqual(first, second)
        self.assertEqual(first_warnings, second_warnings)


if __name__ == '__main__':
    unittest.main()
