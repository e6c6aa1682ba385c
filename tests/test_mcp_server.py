"""
Tests for the MCP server tools.
"""

from working_day_calculator import mcp_server


class TestMcpTools:
    """Tests for the tool functions exposed over MCP."""

    def test_calculate_working_days(self):
        result = mcp_server.calculate_working_days("2023-10-02", "2023-10-06", "DE")

        assert result["working_days"] == 4
        assert result["country_code"] == "DE"
        assert result["country_name"] == "Germany"

    def test_calculate_validation_error(self):
        result = mcp_server.calculate_working_days("2023-10-10", "2023-10-05", "DE")

        assert result["code"] == "DATE_001"
        assert result["error"] == "Start date cannot be after end date"

    def test_calculate_invalid_date_format(self):
        result = mcp_server.calculate_working_days("02.10.2023", "2023-10-06", "DE")
        assert "Invalid date format" in result["error"]

    def test_list_countries(self):
        result = mcp_server.list_countries()

        assert result["count"] == 27
        assert {"code": "FR", "name": "France"} in result["countries"]

    def test_get_holidays(self):
        result = mcp_server.get_holidays(2023, "fr")

        assert result["country_code"] == "FR"
        assert "2023-07-14" in [h["date"] for h in result["holidays"]]
        assert result["holiday_count"] == len(result["holidays"])

    def test_get_holidays_invalid_country(self):
        result = mcp_server.get_holidays(2023, "XX")
        assert result["code"] == "COUNTRY_001"

    def test_create_mcp_server(self):
        server = mcp_server.create_mcp_server()
        assert server.name == "Working Day Calculator"
