from __future__ import annotations

import logging

import flet as ft

from cgpacalc.config.settings import settings
from cgpacalc.domain.logic.grading import GRADE_SCALE
from cgpacalc.services.calculator import (
    CalculatorError,
    CourseRow,
    PENDING_COLOR,
    calculate,
    preview_color,
    preview_grade,
    preview_range,
)

logger = logging.getLogger(__name__)

TONE_COLORS = {
    "excellent": ft.Colors.GREEN_600,
    "good": ft.Colors.BLUE_700,
    "warning": ft.Colors.AMBER_700,
    "probation": ft.Colors.RED_600,
    "invalid": ft.Colors.GREY_600,
}


class CourseRowControls:
    def __init__(self, on_remove) -> None:
        self.title = ft.TextField(label="Course Title", hint_text="e.g., Programming in Java", width=280)
        self.credits = ft.TextField(label="Credits", hint_text="3", width=100, keyboard_type=ft.KeyboardType.NUMBER)
        self.marks = ft.TextField(
            label="Marks",
            hint_text="85",
            width=100,
            keyboard_type=ft.KeyboardType.NUMBER,
            on_change=self.refresh_grade,
        )
        self.grade = ft.Text("-", color=PENDING_COLOR, width=90, weight=ft.FontWeight.BOLD)
        self.grade_range = ft.Text("", width=70, color=ft.Colors.GREY_600)
        self.control = ft.Row(
            [
                self.title,
                self.credits,
                self.marks,
                self.grade,
                self.grade_range,
                ft.IconButton(
                    icon=ft.Icons.CLOSE,
                    tooltip="Remove Course",
                    on_click=lambda _: on_remove(self),
                ),
            ]
        )

    def refresh_grade(self, e: ft.ControlEvent | None = None) -> None:
        self.grade.value = preview_grade(self.marks.value)
        self.grade.color = preview_color(self.marks.value)
        self.grade_range.value = preview_range(self.marks.value)
        if e is not None:
            e.page.update()

    def clear(self) -> None:
        self.title.value = ""
        self.credits.value = ""
        self.marks.value = ""
        self.refresh_grade()

    def values(self) -> CourseRow:
        return self.title.value, self.credits.value, self.marks.value


class CgpaCalculatorApp:
    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self.page.title = settings.app_title
        self.page.scroll = ft.ScrollMode.AUTO
        self.course_rows: list[CourseRowControls] = []

        self.current_cgpa = ft.TextField(label="Current CGPA", value="0", width=180)
        self.completed_credits = ft.TextField(label="Completed Credits", value="0", width=180)
        self.courses_column = ft.Column(spacing=8)
        self.error = ft.Text(color=ft.Colors.RED)

        self.semester_gpa = ft.Text(size=18)
        self.new_cgpa = ft.Text(size=18)
        self.total_credits = ft.Text(size=18)
        self.standing = ft.Text(size=18, weight=ft.FontWeight.BOLD)
        self.results = ft.Column(
            [
                ft.Text("Results", size=20, weight=ft.FontWeight.BOLD),
                self.semester_gpa,
                self.new_cgpa,
                self.total_credits,
                self.standing,
            ],
            visible=False,
        )

    def run(self) -> None:
        self.add_course()
        self.page.add(
            ft.Column(
                [
                    ft.Text(settings.app_title, size=28, weight=ft.FontWeight.BOLD),
                    ft.Text("Student Information", size=20, weight=ft.FontWeight.BOLD),
                    ft.Row([self.current_cgpa, self.completed_credits]),
                    ft.Divider(),
                    ft.Text("Current Semester Courses", size=20, weight=ft.FontWeight.BOLD),
                    self.courses_column,
                    ft.Row(
                        [
                            ft.OutlinedButton("Add Course", on_click=lambda _: self.handle_add()),
                            ft.ElevatedButton("Calculate CGPA", on_click=self.handle_calculate),
                            ft.TextButton("Reset", on_click=lambda _: self.handle_reset()),
                        ]
                    ),
                    self.error,
                    self.results,
                    ft.Divider(),
                    self.grading_scale_view(),
                ]
            )
        )

    def grading_scale_view(self) -> ft.Control:
        lines = [
            ft.Text(f"{band.min_mark}-{band.max_mark}: {band.letter} ({band.point:.2f})")
            for band in GRADE_SCALE
        ]
        return ft.Column([ft.Text("Grading Scale", size=20, weight=ft.FontWeight.BOLD), *lines])

    def add_course(self) -> None:
        row = CourseRowControls(self.remove_course)
        self.course_rows.append(row)
        self.courses_column.controls.append(row.control)

    def remove_course(self, row: CourseRowControls) -> None:
        self.course_rows.remove(row)
        self.courses_column.controls.remove(row.control)
        self.page.update()

    def handle_add(self) -> None:
        self.add_course()
        self.page.update()

    def handle_calculate(self, _: ft.ControlEvent) -> None:
        try:
            report = calculate(
                self.current_cgpa.value,
                self.completed_credits.value,
                [row.values() for row in self.course_rows],
            )
        except CalculatorError as exc:
            logger.info("Calculation rejected: %s", exc)
            self.error.value = str(exc)
            self.results.visible = False
            self.page.update()
            return

        self.error.value = ""
        self.semester_gpa.value = f"Semester GPA: {report.semester_gpa_text}"
        self.new_cgpa.value = f"New CGPA: {report.cumulative_cgpa_text}"
        self.total_credits.value = f"Total Credits: {report.result.total_credits}"
        self.standing.value = f"Academic Status: {report.standing}"
        self.standing.color = TONE_COLORS[report.standing_tone]
        self.results.visible = True
        self.page.update()

    def handle_reset(self) -> None:
        self.current_cgpa.value = "0"
        self.completed_credits.value = "0"
        first, rest = self.course_rows[:1], self.course_rows[1:]
        for row in rest:
            self.courses_column.controls.remove(row.control)
        self.course_rows = first
        for row in first:
            row.clear()
        self.error.value = ""
        self.results.visible = False
        self.page.update()


def main(page: ft.Page) -> None:
    CgpaCalculatorApp(page).run()
