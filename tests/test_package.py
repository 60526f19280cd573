"""
Tests for IconPackage APK access.

Package names are passed in so the binary manifest parser is only
exercised through mocks.
"""

from unittest.mock import MagicMock, PropertyMock, patch

from packviewer.services.package import IconPackage
from packviewer.services.resources import ArscResourceTable, NullResourceTable


class TestIconPackage:
    """Test metadata, assets and resources of an icon pack."""

    def test_given_package_name_skips_manifest(self, make_apk):
        with patch("packviewer.services.package.APK") as apk_cls:
            package = IconPackage(make_apk(), package_name="com.example.pack")
        apk_cls.assert_not_called()
        assert package.package_name == "com.example.pack"

    def test_label_falls_back_to_package_name(self, make_apk):
        package = IconPackage(make_apk(), package_name="com.example.pack")
        assert package.label == "com.example.pack"

    def test_explicit_label(self, make_apk):
        package = IconPackage(make_apk(), package_name="com.example.pack", label="Example Icons")
        assert package.label == "Example Icons"

    def test_manifest_supplies_name_and_label(self, make_apk):
        fake_apk = MagicMock()
        fake_apk.package = "com.meowgi.ipg.white"
        fake_apk.application = "White Icons"

        with patch("packviewer.services.package.APK", return_value=fake_apk):
            package = IconPackage(make_apk())

        assert package.package_name == "com.meowgi.ipg.white"
        assert package.label == "White Icons"

    def test_unreadable_label_uses_package_name(self, make_apk):
        fake_apk = MagicMock()
        fake_apk.package = "com.example.pack"
        type(fake_apk).application = PropertyMock(side_effect=ValueError("bad"))

        with patch("packviewer.services.package.APK", return_value=fake_apk):
            package = IconPackage(make_apk())

        assert package.label == "com.example.pack"

    def test_open_asset_reads_text(self, make_apk):
        package = IconPackage(make_apk(appfilter="line one\nline two\n"), package_name="p")
        with package.open_asset("appfilter.xml") as stream:
            assert list(stream) == ["line one\n", "line two\n"]

    def test_resources_from_arsc(self, make_apk):
        fake_apk = MagicMock()
        fake_apk.package = "com.example.pack"

        with patch("packviewer.services.package.APK", return_value=fake_apk):
            package = IconPackage(make_apk())
            assert isinstance(package.resources, ArscResourceTable)

    def test_unparseable_arsc_gives_null_table(self, make_apk):
        fake_apk = MagicMock()
        fake_apk.package = "com.example.pack"
        fake_apk.get_android_resources.side_effect = ValueError("no arsc")

        with patch("packviewer.services.package.APK", return_value=fake_apk):
            package = IconPackage(make_apk())
            assert isinstance(package.resources, NullResourceTable)

    def test_injected_resources_are_used(self, make_apk, fake_resources):
        table = fake_resources()
        package = IconPackage(make_apk(), package_name="p", resources=table)
        assert package.resources is table
