"""Tests for the Markdown reporter."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from attribution_artisan.models import Config, PackageRecord
from attribution_artisan.reporters import MarkdownReporter, format_timestamp, group_by_license

GENERATED_AT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)


@pytest.fixture
def reporter() -> MarkdownReporter:
    """Create a MarkdownReporter instance."""
    return MarkdownReporter()


@pytest.fixture
def packages() -> list[PackageRecord]:
    return [
        PackageRecord(name="pkg-c", version="0.1.0"),
        PackageRecord(
            name="pkg-b",
            version="2.0.0",
            license="MIT OR Apache-2.0",
            repository="https://github.com/example/pkg-b",
        ),
        PackageRecord(
            name="pkg-a",
            version="1.0.0",
            license="MIT",
            homepage="https://example.com/pkg-a",
        ),
    ]


def test_format_timestamp():
    moment = datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=UTC)
    assert format_timestamp(moment) == "2024-01-02T03:04:05.678Z"


class TestGroupByLicense:
    """Test suite for group_by_license."""

    def test_groups_by_whole_license_string(self, packages) -> None:
        groups = group_by_license(packages)

        assert [g.license for g in groups] == ["MIT", "MIT OR Apache-2.0", "UNKNOWN"]
        assert [p.name for p in groups[0].packages] == ["pkg-a"]
        assert [p.name for p in groups[1].packages] == ["pkg-b"]

    def test_packages_sorted_by_name_then_version(self) -> None:
        packages = [
            PackageRecord(name="b", version="1.0.0", license="MIT"),
            PackageRecord(name="a", version="2.0.0", license="MIT"),
            PackageRecord(name="a", version="10.0.0", license="MIT"),
        ]

        (group,) = group_by_license(packages)

        assert [p.display_name for p in group.packages] == ["a@10.0.0", "a@2.0.0", "b@1.0.0"]

    def test_both_sort_keys_order_groups_alphabetically(self, packages) -> None:
        by_name = [g.license for g in group_by_license(packages, "name")]
        by_license = [g.license for g in group_by_license(packages, "license")]

        assert by_name == by_license == sorted(by_name)

    def test_empty_license_grouped_as_unknown(self) -> None:
        (group,) = group_by_license([PackageRecord(name="x", version="1", license="")])
        assert group.license == "UNKNOWN"


class TestMarkdownReporter:
    """Test suite for MarkdownReporter."""

    def test_format_properties(self, reporter) -> None:
        assert reporter.format_name == "markdown"
        assert reporter.default_extension == ".md"

    def test_render_document(self, reporter, packages) -> None:
        output = reporter.render(
            packages, {"MIT": "MIT License\n\nText body.\n\n"}, Config(), GENERATED_AT
        )

        assert output == (
            "# Third-Party Notices\n"
            "\n"
            "_Generated by Attribution Artisan on 2024-01-02T03:04:05.000Z_\n"
            "\n"
            "This document lists third-party packages included in this project, "
            "along with their license information. For selected licenses, the full "
            "text is included below.\n"
            "\n"
            "## MIT\n"
            "\n"
            "- pkg-a@1.0.0 — https://example.com/pkg-a\n"
            "\n"
            "## MIT OR Apache-2.0\n"
            "\n"
            "- pkg-b@2.0.0 — https://github.com/example/pkg-b\n"
            "\n"
            "## UNKNOWN\n"
            "\n"
            "- pkg-c@0.1.0\n"
            "\n"
            "---\n"
            "\n"
            "# License Texts\n"
            "\n"
            "## MIT\n"
            "\n"
            "```\n"
            "MIT License\n"
            "\n"
            "Text body.\n"
            "```\n"
            "\n"
        )

    def test_no_license_texts_section_without_texts(self, reporter, packages) -> None:
        output = reporter.render(packages, {}, Config(), GENERATED_AT)

        assert "# License Texts" not in output
        assert output.endswith("- pkg-c@0.1.0\n\n")

    def test_license_texts_sorted(self, reporter, packages) -> None:
        texts = {"MIT": "mit", "Apache-2.0": "apache", "BSD-3-Clause": "bsd"}

        output = reporter.render(packages, texts, Config(), GENERATED_AT)

        positions = [output.index(f"## {k}\n\n```") for k in ["Apache-2.0", "BSD-3-Clause", "MIT"]]
        assert positions == sorted(positions)

    def test_text_not_escaped(self, reporter) -> None:
        text = 'THE SOFTWARE IS PROVIDED "AS IS" <without> warranty & more'

        output = reporter.render([], {"MIT": text}, Config(), GENERATED_AT)

        assert text in output

    def test_default_timestamp(self, reporter) -> None:
        output = reporter.render([], {}, Config())
        assert f"on {datetime.now(UTC):%Y-}" in output

    def test_write(self, reporter, packages, tmp_path: Path) -> None:
        output_path = tmp_path / "NOTICES.md"
        output_path.write_text("stale content", encoding="utf-8")

        reporter.write(packages, {}, Config(), output_path, GENERATED_AT)

        content = output_path.read_text(encoding="utf-8")
        assert "stale content" not in content
        assert content == reporter.render(packages, {}, Config(), GENERATED_AT)

    def test_custom_template(self, packages, tmp_path: Path) -> None:
        template = tmp_path / "custom.md.j2"
        template.write_text(
            "{% for group in groups %}{{ group.license }}: "
            "{{ group.packages | map(attribute='name') | join(', ') }}\n{% endfor %}",
            encoding="utf-8",
        )

        output = MarkdownReporter(template_path=template).render(
            packages, {}, Config(), GENERATED_AT
        )

        assert output == "MIT: pkg-a\nMIT OR Apache-2.0: pkg-b\nUNKNOWN: pkg-c\n"
