import unittest
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from models.nodule import Unit
from nlp.errors import MeasurementNotFound
from nlp.measurement_parser import parse_measurement, _parse_decimal


class TestMeasurementParser(unittest.TestCase):

    def test_single_dimension(self):
        m = parse_measurement("calcified pulmonary nodule measuring 5 mm")
        self.assertEqual(m.values, (5.0,))
        self.assertEqual(m.unit, Unit.MM)
        self.assertEqual(m.raw_text, "5 mm")

    def test_two_dimensions(self):
        m = parse_measurement("nodule measuring 7 x 8 mm (series 1 image 30)")
        self.assertEqual(m.values, (7.0, 8.0))
        self.assertEqual(m.raw_text, "7 x 8 mm")

    def test_three_dimensions_keep_order(self):
        m = parse_measurement("The solid component measures 6 x 4 x 8 mm")
        self.assertEqual(m.values, (6.0, 4.0, 8.0))

    def test_decimal_centimeters(self):
        m = parse_measurement("largest measuring 1.5 x 1.5 cm in the left lower lobe")
        self.assertEqual(m.values, (1.5, 1.5))
        self.assertEqual(m.unit, Unit.CM)

    def test_case_insensitive_and_compact(self):
        m = parse_measurement("Nodule 3X4MM in the lingula")
        self.assertEqual(m.values, (3.0, 4.0))
        self.assertEqual(m.unit, Unit.MM)
        self.assertEqual(m.raw_text, "3X4MM")

    def test_first_match_wins(self):
        m = parse_measurement("nodule 4 mm and another nodule 9 x 9 mm")
        self.assertEqual(m.values, (4.0,))

    def test_unit_required(self):
        with self.assertRaises(MeasurementNotFound):
            parse_measurement("nodule measuring 7 x 8 (series 1 image 30)")

    def test_unit_must_be_whole_word(self):
        with self.assertRaises(MeasurementNotFound):
            parse_measurement("nodule with pressure 120 mmHg")

    def test_no_numbers(self):
        with self.assertRaises(MeasurementNotFound):
            parse_measurement("A pulmonary nodule is noted without measurable size")

    def test_zero_is_not_a_measurement(self):
        with self.assertRaises(MeasurementNotFound):
            parse_measurement("nodule 0 mm")

    def test_parse_decimal(self):
        self.assertEqual(_parse_decimal("2.25"), 2.25)
        self.assertIsNone(_parse_decimal(None))
        self.assertIsNone(_parse_decimal("1.2.3"))
        self.assertIsNone(_parse_decimal("0"))


if __name__ == '__main__':
    unittest.main()
