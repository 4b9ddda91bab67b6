"""Unit tests for the console page renderer."""

from datetime import date

from calendarpage.display.console_renderer import ConsoleRenderer


class TestConsoleRenderer:
    """Tests for plain-text page previews."""

    def test_render_day_page(self, make_controller):
        controller = make_controller(
            date(2018, 2, 14), {"fixed_height": True}, selected=date(2018, 2, 7)
        )

        output = ConsoleRenderer().render_page(controller.render())
        lines = output.splitlines()

        assert lines[1].strip() == "Month February, 2018"
        assert lines[3].split() == ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]
        assert "*7*" in output

    def test_render_week_numbers_and_monday_start(self, make_controller):
        controller = make_controller(date(2018, 2, 14), calendar_start_day=1)

        output = ConsoleRenderer(show_week_numbers=True).render_page(
            controller.render(), first_weekday=controller.week_starts_on
        )
        lines = output.splitlines()

        assert lines[3].split() == ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]
        assert lines[4].split()[0] == "5"

    def test_render_disabled_days_in_brackets(self, make_controller):
        controller = make_controller(date(2018, 2, 14), min_date=date(2018, 2, 10))

        output = ConsoleRenderer().render_page(controller.render())

        assert "[9]" in output
        assert "[1]" in output
        assert "10" in output and "[10]" not in output

    def test_render_selected_week_marker(self, make_controller):
        controller = make_controller(
            date(2018, 2, 14), {"show_week_picker": True}, selected=date(2018, 2, 7)
        )

        lines = ConsoleRenderer().render_page(controller.render()).splitlines()

        marked = [line for line in lines if line.endswith(" <")]
        assert len(marked) == 1
        assert "*4*" in marked[0]
        assert "*7*" not in marked[0]

    def test_render_month_page(self, make_controller):
        controller = make_controller(
            date(2024, 1, 15),
            {"show_month_year_picker": True},
            selected=date(2024, 2, 1),
            max_date=date(2024, 10, 5),
        )

        output = ConsoleRenderer().render_page(controller.render())

        assert "*Feb*" in output
        assert "[Nov]" in output
        assert "[Dec]" in output

    def test_render_selecting_range_note(self, make_controller):
        controller = make_controller(
            date(2024, 1, 15),
            {"show_quarter_year_picker": True, "selects_end": True},
            start_date=date(2024, 1, 2),
            selecting_date=date(2024, 8, 1),
        )

        output = ConsoleRenderer().render_page(controller.render())

        assert "Selecting range" in output
        assert "~Q2~" in output
