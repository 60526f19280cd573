"""
Tests for the appfilter manifest parser.

Uses real APK zip files for load_appfilter (no mocking of zip access).
"""

import io
import zlib

import pytest

from packviewer.services.appfilter import load_appfilter, parse_appfilter
from packviewer.services.package import AssetMissing, IconPackage


class TestParseAppfilter:
    """Test the line-oriented drawable scan."""

    def test_single_line_scenario(self):
        assert parse_appfilter(['<item drawable="com.example__sun" />']) == ["com.example__sun"]

    def test_empty_stream_gives_no_names(self):
        assert parse_appfilter(io.StringIO("")) == []

    def test_one_name_per_matching_line(self):
        text = (
            '<resources>\n'
            '  <item component="a" drawable="alpha" />\n'
            '  <item component="b" />\n'
            '  <item component="c" drawable="gamma" />\n'
            '</resources>\n'
        )
        assert parse_appfilter(io.StringIO(text)) == ["alpha", "gamma"]

    def test_only_first_match_per_line(self):
        line = '<item drawable="first" /><item drawable="second" />'
        assert parse_appfilter([line]) == ["first"]

    def test_duplicates_and_order_are_kept(self):
        lines = ['drawable="b"', 'drawable="a"', 'drawable="b"']
        assert parse_appfilter(lines) == ["b", "a", "b"]

    def test_malformed_occurrences_are_skipped(self):
        lines = [
            'drawable=""',            # empty name
            'drawable="unterminated',
            "drawable='single'",
            'drawable = "spaced"',
        ]
        assert parse_appfilter(lines) == []

    def test_count_matches_lines_with_an_occurrence(self):
        lines = [f'<item drawable="icon_{i}" />' for i in range(50)]
        lines += ["<!-- comment -->", "<category title=\"All\" />"]
        assert len(parse_appfilter(lines)) == 50

    def test_read_failure_keeps_earlier_lines(self):
        def broken_stream():
            yield 'drawable="kept"\n'
            raise OSError("truncated")

        assert parse_appfilter(broken_stream()) == ["kept"]

    def test_decompression_failure_keeps_earlier_lines(self):
        def broken_stream():
            yield 'drawable="first"\n'
            yield 'drawable="second"\n'
            raise zlib.error("invalid block type")

        assert parse_appfilter(broken_stream()) == ["first", "second"]


class TestLoadAppfilter:
    """Test loading appfilter.xml out of an APK."""

    def test_loads_names_from_apk(self, make_apk):
        package = IconPackage(make_apk(), package_name="com.example.pack")
        assert load_appfilter(package) == [
            "com_example__sun",
            "com_example__moon",
            "com_example__star",
        ]

    def test_missing_asset_gives_empty_list(self, make_apk):
        package = IconPackage(make_apk(appfilter=None), package_name="com.example.pack")
        assert load_appfilter(package) == []

    def test_missing_apk_gives_empty_list(self, tmp_path):
        package = IconPackage(tmp_path / "gone.apk", package_name="com.example.pack")
        assert load_appfilter(package) == []

    def test_empty_asset_gives_empty_list(self, make_apk):
        package = IconPackage(make_apk(appfilter=""), package_name="com.example.pack")
        assert load_appfilter(package) == []

    def test_open_asset_raises_asset_missing(self, make_apk):
        package = IconPackage(make_apk(appfilter=None), package_name="com.example.pack")
        with pytest.raises(AssetMissing):
            with package.open_asset("appfilter.xml"):
                pass
