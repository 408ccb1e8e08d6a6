"""Unit tests for merging translations across interface inheritance."""
from i18n_classgen.translation_aggregator import TranslationAggregator, legal_methods
from i18n_classgen.translation_discovery import TranslationFileLocator


class TestLegalMethods:
    def test_includes_transitive_ancestors(self, make_interface):
        grand_parent = make_interface("GrandParent", methods=[("a", "a")])
        parent = make_interface("Parent", methods=[("b", "b")], extends=[grand_parent])
        child = make_interface("Child", methods=[("c", "c")], extends=[parent])

        assert [m.name for m in legal_methods(child)] == ["c", "b", "a"]

    def test_marker_interfaces_are_excluded(self, make_interface, basic_logger):
        child = make_interface("Child", methods=[("c", "c")], extends=[basic_logger])
        assert [m.name for m in legal_methods(child)] == ["c"]

    def test_interfaces_reachable_only_through_a_marker_are_excluded(self, make_interface):
        hidden = make_interface("Hidden", methods=[("h", "h")])
        marker = make_interface("Marker", extends=[hidden], marker=True)
        child = make_interface("Child", methods=[("c", "c")], extends=[marker])

        assert [m.name for m in legal_methods(child)] == ["c"]

    def test_diamond_is_collected_once(self, make_interface):
        base = make_interface("Base", methods=[("a", "a")])
        left = make_interface("Left", extends=[base])
        right = make_interface("Right", extends=[base])
        child = make_interface("Child", extends=[left, right])

        assert [m.name for m in legal_methods(child)] == ["a"]


class TestTranslationAggregator:
    def _aggregator(self, translations_root, diagnostics):
        return TranslationAggregator(TranslationFileLocator(str(translations_root)), diagnostics)

    def test_closest_declaration_wins(self, make_interface, method_of, translations_root, write_translation, diagnostics):
        parent = make_interface("Parent", methods=[("m", "k")])
        child = make_interface("Child", extends=[parent])
        write_translation("Parent", "fr", "k=P\n")
        write_translation("Child", "fr", "k=C\n")
        aggregator = self._aggregator(translations_root, diagnostics)
        child_file = aggregator.locator.find_translation_files(child)[0]

        merged = aggregator.merged_translations(child, child_file)

        assert merged == {method_of(parent, "m"): "C"}
        assert diagnostics.warnings == []

    def test_inherits_ancestor_translation_when_leaf_is_silent(self, make_interface, method_of, translations_root,
                                                               write_translation, diagnostics):
        parent = make_interface("Parent", methods=[("m", "k")])
        child = make_interface("Child", methods=[("n", "n")], extends=[parent])
        write_translation("Parent", "fr", "k=P\n")
        write_translation("Child", "fr", "n=N\n")
        aggregator = self._aggregator(translations_root, diagnostics)

        merged = aggregator.merged_translations(child, aggregator.locator.find_translation_files(child)[0])

        assert merged == {method_of(parent, "m"): "P", method_of(child, "n"): "N"}

    def test_more_specific_ancestor_file_wins(self, make_interface, method_of, translations_root, write_translation,
                                              diagnostics):
        parent = make_interface("Parent", methods=[("m", "k")])
        child = make_interface("Child", extends=[parent])
        write_translation("Parent", "fr_CA", "k=Quebec\n")
        write_translation("Parent", "fr", "k=France\n")
        write_translation("Child", "fr", "")
        aggregator = self._aggregator(translations_root, diagnostics)

        merged = aggregator.merged_translations(child, aggregator.locator.find_translation_files(child)[0])

        assert merged == {method_of(parent, "m"): "Quebec"}

    def test_marker_ancestor_files_are_ignored(self, make_interface, basic_logger, translations_root,
                                               write_translation, diagnostics):
        child = make_interface("Child", methods=[("c", "c")], extends=[basic_logger])
        write_translation("BasicLogger", "fr", "debugf=ignored\n", package="org.jboss.logging")
        write_translation("Child", "fr", "c=C\n")
        aggregator = self._aggregator(translations_root, diagnostics)

        merged = aggregator.merged_translations(child, aggregator.locator.find_translation_files(child)[0])

        assert {m.name: v for m, v in merged.items()} == {"c": "C"}

    def test_ancestor_warnings_reported_once_per_pass(self, make_interface, translations_root, write_translation,
                                                      diagnostics):
        parent = make_interface("Parent", methods=[("m", "k")])
        child = make_interface("Child", extends=[parent])
        write_translation("Parent", "fr", "orphan=x\n")
        write_translation("Child", "fr", "")
        write_translation("Child", "de", "")
        aggregator = self._aggregator(translations_root, diagnostics)

        for child_file in aggregator.locator.find_translation_files(child):
            aggregator.merged_translations(child, child_file)

        assert [w.message for w in diagnostics.warnings] == ["orphan translation key: no method declares key orphan"]

    def test_unreadable_ancestor_file_is_reported_and_skipped(self, make_interface, method_of, translations_root,
                                                              write_translation, diagnostics):
        parent = make_interface("Parent", methods=[("m", "k")])
        child = make_interface("Child", methods=[("n", "n")], extends=[parent])
        write_translation("Parent", "fr", "k=\\uZZZZ\n")
        write_translation("Child", "fr", "n=N\n")
        aggregator = self._aggregator(translations_root, diagnostics)

        merged = aggregator.merged_translations(child, aggregator.locator.find_translation_files(child)[0])

        assert merged == {method_of(child, "n"): "N"}
        assert len(diagnostics.errors) == 1
        assert "Parent.i18n_fr.properties" in diagnostics.errors[0].message

    def test_merged_map_is_a_new_dict(self, make_interface, translations_root, write_translation, diagnostics):
        parent = make_interface("Parent", methods=[("m", "k")])
        child = make_interface("Child", methods=[("n", "n")], extends=[parent])
        write_translation("Parent", "fr", "k=P\n")
        write_translation("Child", "fr", "n=N\n")
        aggregator = self._aggregator(translations_root, diagnostics)
        child_file = aggregator.locator.find_translation_files(child)[0]

        merged = aggregator.merged_translations(child, child_file)

        assert len(aggregator.ancestor_translations(child)) == 1
        assert len(merged) == 2
