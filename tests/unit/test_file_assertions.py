"""Tests for the generated-file assertion helpers."""

import re
from pathlib import Path

import pytest

import genassert
from genassert import AssertionFailedError


class TestFile:
    def test_accepts_existing_file(self, generated_tree: Path) -> None:
        genassert.assert_file("testFile")

    def test_accepts_directory(self, generated_tree: Path) -> None:
        genassert.assert_file("templates")

    def test_accepts_path_object(self, generated_tree: Path) -> None:
        genassert.assert_file(generated_tree / "testFile")

    def test_accepts_list_of_existing_files(self, generated_tree: Path) -> None:
        genassert.assert_file(["testFile", "testFile2"])

    def test_rejects_missing_file(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError, match="etherealTestFile, no such file or directory"):
            genassert.assert_file("etherealTestFile")

    def test_rejects_list_with_missing_file(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError, match="intangibleTestFile"):
            genassert.assert_file(["testFile", "intangibleTestFile"])

    def test_failure_is_an_assertion_error(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionError):
            genassert.assert_file("etherealTestFile")


class TestNoFile:
    def test_accepts_missing_file(self, generated_tree: Path) -> None:
        genassert.assert_no_file("etherealTestFile")

    def test_accepts_list_of_missing_files(self, generated_tree: Path) -> None:
        genassert.assert_no_file(["etherealTestFile", "intangibleTestFile"])

    def test_rejects_existing_file(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError, match="testFile exists"):
            genassert.assert_no_file("testFile")

    def test_rejects_list_with_existing_file(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError):
            genassert.assert_no_file(["etherealTestFile", "testFile"])


class TestFileContent:
    def test_accepts_matching_regex(self, generated_tree: Path) -> None:
        genassert.assert_file_content("testFile", re.compile(r"Roses are red"))

    def test_accepts_contained_string(self, generated_tree: Path) -> None:
        genassert.assert_file_content("testFile", "Roses are red")

    def test_rejects_non_matching_regex(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError):
            genassert.assert_file_content("testFile", re.compile(r"Roses are blue"))

    def test_rejects_missing_string_and_shows_body(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError) as exc_info:
            genassert.assert_file_content("testFile", "Roses are blue")

        message = str(exc_info.value)
        assert "testFile did not match 'Roses are blue'" in message
        assert "Contained:\n\nRoses are red." in message

    def test_accepts_list_of_pairs(self, generated_tree: Path) -> None:
        genassert.assert_file_content([
            ("testFile", re.compile(r"Roses are red")),
            ("testFile2", re.compile(r"Violets are blue")),
        ])

    def test_rejects_list_with_one_non_matching_pair(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError, match="testFile2"):
            genassert.assert_file_content([
                ("testFile", re.compile(r"Roses are red")),
                ("testFile2", re.compile(r"Violets are orange")),
            ])

    def test_missing_file_fails_on_existence(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError, match="no such file or directory"):
            genassert.assert_file_content("etherealTestFile", "anything")

    def test_exact_content_round_trip(self, tmp_path: Path) -> None:
        content = "export default {\n  name: 'Coleman',\n  age: 0\n}\n"
        target = tmp_path / "user.js"
        target.write_text(content, encoding="utf-8")

        genassert.assert_file_content(target, content)

    def test_body_is_truncated_when_configured(self, generated_tree: Path) -> None:
        with genassert.config_scope(max_body_chars=5):
            with pytest.raises(AssertionFailedError) as exc_info:
                genassert.assert_file_content("testFile", "Violets")

        message = str(exc_info.value)
        assert "Roses\n... (10 more characters)" in message
        assert "are red" not in message

    def test_matches_crlf_literally(self, generated_tree: Path) -> None:
        genassert.assert_file_content("crlfFile", "line one\r\nline two")

        with pytest.raises(AssertionFailedError):
            genassert.assert_no_file_content("crlfFile", "one\r\n")


class TestNoFileContent:
    def test_accepts_non_matching_regex(self, generated_tree: Path) -> None:
        genassert.assert_no_file_content("testFile", re.compile(r"Roses are blue"))

    def test_accepts_absent_string(self, generated_tree: Path) -> None:
        genassert.assert_no_file_content("testFile", "Roses are blue")

    def test_rejects_matching_regex(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError, match="testFile matched '/Roses are red/'"):
            genassert.assert_no_file_content("testFile", re.compile(r"Roses are red"))

    def test_rejects_contained_string(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError):
            genassert.assert_no_file_content("testFile", "Roses are red")

    def test_accepts_list_of_pairs(self, generated_tree: Path) -> None:
        genassert.assert_no_file_content([
            ("testFile", re.compile(r"Roses are green")),
            ("testFile2", re.compile(r"Violets are orange")),
        ])

    def test_rejects_list_with_one_matching_pair(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError):
            genassert.assert_no_file_content([
                ("testFile", re.compile(r"Roses are red")),
                ("testFile2", re.compile(r"Violets are orange")),
            ])

    def test_missing_file_fails_on_existence(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError, match="no such file or directory"):
            genassert.assert_no_file_content("etherealTestFile", "anything")

    @pytest.mark.parametrize(
        "pattern",
        ["Roses", "roses", re.compile(r"red\.$", re.M), re.compile(r"^red")],
    )
    def test_is_the_complement_of_file_content(self, generated_tree: Path, pattern) -> None:
        outcomes = []
        for check in (genassert.assert_file_content, genassert.assert_no_file_content):
            try:
                check("testFile", pattern)
            except AssertionFailedError:
                outcomes.append(False)
            else:
                outcomes.append(True)

        assert outcomes[0] != outcomes[1]


class TestEqualsFileContent:
    def test_accepts_equal_content(self, generated_tree: Path) -> None:
        genassert.assert_equals_file_content("testFile", "Roses are red.\n")

    def test_ignores_crlf_in_file(self, generated_tree: Path) -> None:
        genassert.assert_equals_file_content("crlfFile", "line one\nline two\n")

    def test_lone_cr_in_file_is_not_normalised(self, tmp_path: Path) -> None:
        target = tmp_path / "cr.txt"
        target.write_bytes(b"a\rb")

        with pytest.raises(AssertionFailedError, match="content differs"):
            genassert.assert_equals_file_content(target, "a\nb")
        genassert.assert_equals_file_content(target, "a\rb")

    def test_rejects_partial_content(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError, match="testFile content differs"):
            genassert.assert_equals_file_content("testFile", "Roses are red.")

    def test_accepts_list_of_pairs(self, generated_tree: Path) -> None:
        genassert.assert_equals_file_content([
            ("testFile", "Roses are red.\n"),
            ("testFile2", "Violets are blue.\n"),
        ])

    def test_rejects_list_with_one_different_pair(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError, match="testFile2"):
            genassert.assert_equals_file_content([
                ("testFile", "Roses are red.\n"),
                ("testFile2", "Violets are orange.\n"),
            ])

    def test_missing_file_fails_on_existence(self, generated_tree: Path) -> None:
        with pytest.raises(AssertionFailedError, match="no such file or directory"):
            genassert.assert_equals_file_content("etherealTestFile", "")


class TestTextEqual:
    def test_passes_with_similar_lines(self) -> None:
        genassert.assert_text_equal("I have a yellow cat", "I have a yellow cat")

    def test_fails_with_different_lines(self) -> None:
        with pytest.raises(AssertionFailedError) as exc_info:
            genassert.assert_text_equal("I have a yellow cat", "I have a brown cat")

        message = str(exc_info.value)
        assert "-I have a brown cat" in message
        assert "+I have a yellow cat" in message

    def test_passes_with_different_new_line_types(self) -> None:
        genassert.assert_text_equal("I have a\nyellow cat", "I have a\r\nyellow cat")

    def test_lone_carriage_return_is_not_normalised(self) -> None:
        with pytest.raises(AssertionFailedError):
            genassert.assert_text_equal("a\rb", "a\nb")

    def test_other_whitespace_is_significant(self) -> None:
        with pytest.raises(AssertionFailedError):
            genassert.assert_text_equal("a b\n", "a b \n")
