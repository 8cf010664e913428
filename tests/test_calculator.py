import unittest

from cgpacalc.domain.models.entities import Course, StandingLabel
from cgpacalc.services.calculator import (
    CGPA_RANGE_MESSAGE,
    NEGATIVE_CREDITS_MESSAGE,
    NO_COURSES_MESSAGE,
    PENDING_COLOR,
    CalculatorError,
    calculate,
    collect_courses,
    format_gpa,
    grade_color,
    preview_color,
    preview_grade,
    preview_range,
)

ROWS = [
    ("Programming in Java", "3", "88"),
    ("Data Structures", "3", "92"),
    ("Database Management", "3", "85"),
    ("Web Technologies", "3", "90"),
]


class CollectCoursesTests(unittest.TestCase):
    def test_keeps_valid_rows(self):
        courses = collect_courses(ROWS)
        self.assertEqual(len(courses), 4)
        self.assertEqual(courses[0], Course("Programming in Java", 3, 88.0))

    def test_drops_incomplete_and_invalid_rows(self):
        rows = [
            ("Java", "3", "88"),
            ("", "3", "90"),
            ("   ", "3", "90"),
            ("DS", "0", "80"),
            ("DB", "3", "101"),
            ("OS", "3", "-5"),
            ("Web", "abc", "70"),
            ("AI", "3", None),
            ("  Networks ", "3", "72.5"),
        ]
        courses = collect_courses(rows)
        self.assertEqual([c.title for c in courses], ["Java", "Networks"])
        self.assertEqual(courses[1].marks, 72.5)


class PreviewTests(unittest.TestCase):
    def test_preview_grade(self):
        self.assertEqual(preview_grade("95"), "A+ (4.00)")
        self.assertEqual(preview_grade("62.5"), "D+ (2.50)")
        self.assertEqual(preview_grade("101"), "Max 100")
        self.assertEqual(preview_grade(""), "-")
        self.assertEqual(preview_grade("-3"), "-")
        self.assertEqual(preview_grade("abc"), "-")
        self.assertEqual(preview_grade(None), "-")

    def test_preview_range(self):
        self.assertEqual(preview_range("87"), "85-89")
        self.assertEqual(preview_range("100"), "90-100")
        self.assertEqual(preview_range("0"), "0-49")
        self.assertEqual(preview_range("101"), "")
        self.assertEqual(preview_range("-1"), "")
        self.assertEqual(preview_range(""), "")

    def test_colors(self):
        self.assertEqual(grade_color("A+"), "#16a34a")
        self.assertEqual(grade_color("F"), "#dc2626")
        self.assertEqual(grade_color("Invalid"), PENDING_COLOR)
        self.assertEqual(preview_color("77"), "#004ea2")
        self.assertEqual(preview_color("150"), "#ef4444")
        self.assertEqual(preview_color(""), PENDING_COLOR)


class CalculateTests(unittest.TestCase):
    def test_full_calculation(self):
        report = calculate("3.45", "36", ROWS)
        self.assertEqual(len(report.courses), 4)
        self.assertAlmostEqual(report.result.semester_gpa, 3.875, places=9)
        self.assertAlmostEqual(report.result.cumulative_cgpa, 3.55625, places=6)
        self.assertEqual(report.result.total_credits, 48)
        self.assertIs(report.standing, StandingLabel.EXCELLENT)
        self.assertEqual(report.standing_tone, "excellent")
        self.assertEqual(report.cumulative_cgpa_text, "3.56")

    def test_blank_student_fields_default_to_zero(self):
        report = calculate("", None, ROWS)
        self.assertAlmostEqual(report.result.cumulative_cgpa, 3.875, places=9)
        self.assertEqual(report.result.total_credits, 12)
        self.assertIs(report.standing, StandingLabel.DEANS_LIST)

    def test_invalid_cgpa(self):
        for value in ("4.5", "-1"):
            with self.subTest(value=value):
                with self.assertRaises(CalculatorError) as ctx:
                    calculate(value, "10", ROWS)
                self.assertEqual(str(ctx.exception), CGPA_RANGE_MESSAGE)

    def test_unparseable_cgpa_counts_as_zero(self):
        report = calculate("abc", "0", ROWS)
        self.assertAlmostEqual(report.result.cumulative_cgpa, 3.875, places=9)

    def test_fractional_completed_credits_truncated(self):
        report = calculate("3.45", "36.5", ROWS)
        self.assertEqual(report.result.total_credits, 48)
        self.assertAlmostEqual(report.result.cumulative_cgpa, 3.55625, places=6)

    def test_unparseable_completed_credits_count_as_zero(self):
        report = calculate("3.45", "abc", [("Java", "3", "88")])
        self.assertEqual(report.result.total_credits, 3)
        self.assertAlmostEqual(report.result.cumulative_cgpa, 3.75, places=9)

    def test_negative_credits(self):
        with self.assertRaises(CalculatorError) as ctx:
            calculate("3.0", "-1", ROWS)
        self.assertEqual(str(ctx.exception), NEGATIVE_CREDITS_MESSAGE)

    def test_no_valid_courses(self):
        for rows in ([], [("", "3", "80"), ("Java", "0", "80")]):
            with self.subTest(rows=rows):
                with self.assertRaises(CalculatorError) as ctx:
                    calculate("3.0", "10", rows)
                self.assertEqual(str(ctx.exception), NO_COURSES_MESSAGE)

    def test_format_gpa(self):
        self.assertEqual(format_gpa(3.55625, places=2), "3.56")
        self.assertEqual(format_gpa(3.0, places=3), "3.000")


if __name__ == "__main__":
    unittest.main()
