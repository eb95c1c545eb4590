import unittest
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from dataclasses import FrozenInstanceError

from models.nodule import Composition, Multiplicity, Unit
from nlp.descriptor_extractor import (
    ScanState,
    extract_descriptor,
    references_nodule,
    scan_tokens,
    step,
)
from nlp.errors import MeasurementNotFound, NotANoduleReference
from nlp.normalize import normalize_sentence, token_window, tokenize


class TestNormalization(unittest.TestCase):

    def test_strips_single_trailing_period_and_commas(self):
        self.assertEqual(normalize_sentence("Nodule, 5 mm.."), "Nodule 5 mm.")
        self.assertEqual(normalize_sentence("  (series 1, image 30).  "), "(series 1 image 30)")

    def test_rejects_non_string(self):
        with self.assertRaises(TypeError):
            normalize_sentence(None)

    def test_token_window(self):
        pairs = list(token_window(tokenize("Part Solid nodule")))
        self.assertEqual(pairs, [("part", "solid"), ("solid", "nodule"), ("nodule", None)])


class TestTransitions(unittest.TestCase):
    """Each rule checked in isolation through the transition function."""

    def test_solid_from_unspecified(self):
        state, skip = step(ScanState(), "solid", None)
        self.assertEqual(state.composition, Composition.SOLID)
        self.assertFalse(skip)

    def test_solid_after_ground_glass(self):
        state, _ = step(ScanState(composition=Composition.GROUND_GLASS), "solid", None)
        self.assertEqual(state.composition, Composition.PART_SOLID)

    def test_ground_glass_bigram_after_solid(self):
        state, _ = step(ScanState(composition=Composition.SOLID), "ground", "glass")
        self.assertEqual(state.composition, Composition.PART_SOLID)

    def test_ground_without_glass_is_ignored(self):
        state, _ = step(ScanState(), "ground", "floor")
        self.assertEqual(state.composition, Composition.UNSPECIFIED)

    def test_part_solid_bigram_consumes_lookahead(self):
        state, skip = step(ScanState(), "part", "solid")
        self.assertEqual(state.composition, Composition.PART_SOLID)
        self.assertTrue(skip)

    def test_part_solid_is_absorbing(self):
        state = ScanState(composition=Composition.PART_SOLID)
        for token in ("solid", "groundglass"):
            state, _ = step(state, token, None)
        self.assertEqual(state.composition, Composition.PART_SOLID)

    def test_hyphenated_part_solid_consumes_lookahead(self):
        state, skip = step(ScanState(), "part-solid", "calcified")
        self.assertEqual(state.composition, Composition.PART_SOLID)
        self.assertTrue(skip)


class TestTokenScan(unittest.TestCase):

    def test_defaults(self):
        state = scan_tokens("pulmonary nodule 5 mm")
        self.assertEqual(state, ScanState())

    def test_solid_then_ground_glass(self):
        self.assertEqual(scan_tokens("solid and ground glass nodule").composition, Composition.PART_SOLID)

    def test_groundglass_then_solid(self):
        self.assertEqual(scan_tokens("groundglass nodule with solid").composition, Composition.PART_SOLID)

    def test_hyphenated_part_solid(self):
        state = scan_tokens("part-solid nodules")
        self.assertEqual(state.composition, Composition.PART_SOLID)
        self.assertEqual(state.multiplicity, Multiplicity.MULTIPLE)

    def test_token_after_part_solid_is_skipped(self):
        self.assertFalse(scan_tokens("part-solid calcified nodule").calcified)
        self.assertTrue(scan_tokens("part-solid nodule calcified").calcified)

    def test_plural_next_to_punctuation(self):
        for sentence in (
            "multiple solid nodules; largest 7 mm",
            "solid nodules: largest 7 mm",
            "(nodules) 7 mm",
            "Multiple solid Nodules. The largest measures 7 mm",
        ):
            with self.subTest(sentence=sentence):
                self.assertEqual(scan_tokens(sentence).multiplicity, Multiplicity.MULTIPLE)

    def test_singular_stays_single(self):
        self.assertEqual(scan_tokens("nodule; 7 mm").multiplicity, Multiplicity.SINGLE)

    def test_last_calcification_token_wins(self):
        self.assertFalse(scan_tokens("calcified and noncalcified nodule").calcified)
        self.assertTrue(scan_tokens("non-calcified nodule with calcifications").calcified)

    def test_partially_calcified_counts_as_calcified(self):
        self.assertTrue(scan_tokens("partially calcified nodule").calcified)


class TestExtractDescriptor(unittest.TestCase):

    def test_solid_noncalcified(self):
        d = extract_descriptor(
            "Incidental right upper lobe solid noncalcified pulmonary nodule "
            "measuring 7 x 8 mm (series 1, image 30)."
        )
        self.assertEqual(d.multiplicity, Multiplicity.SINGLE)
        self.assertEqual(d.composition, Composition.SOLID)
        self.assertFalse(d.calcified)
        self.assertEqual(d.measurements, (7.0, 8.0))
        self.assertEqual(d.unit, Unit.MM)
        self.assertEqual(d.raw_measurement_text, "7 x 8 mm")

    def test_multiple_groundglass(self):
        d = extract_descriptor(
            "Multiple bilateral groundglass pulmonary nodules, largest measuring "
            "1.5 x 1.5 cm in the left lower lobe."
        )
        self.assertEqual(d.multiplicity, Multiplicity.MULTIPLE)
        self.assertEqual(d.composition, Composition.GROUND_GLASS)
        self.assertEqual(d.measurements, (1.5, 1.5))
        self.assertEqual(d.unit, Unit.CM)

    def test_nodule_check_comes_first(self):
        with self.assertRaises(NotANoduleReference):
            extract_descriptor("Mass measuring 3 cm.")

    def test_missing_measurement(self):
        with self.assertRaises(MeasurementNotFound):
            extract_descriptor("A pulmonary nodule is noted without measurable size.")

    def test_references_nodule(self):
        self.assertTrue(references_nodule("NODULES seen"))
        self.assertFalse(references_nodule("There is no finding of note"))

    def test_descriptor_is_immutable(self):
        d = extract_descriptor("Nodule 5 mm.")
        with self.assertRaises(FrozenInstanceError):
            d.calcified = True


if __name__ == '__main__':
    unittest.main()
