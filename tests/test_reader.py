"""Tests for the edge-list reader."""

from pathlib import Path

import pytest

from diameter_cli.errors import EdgeListError
from diameter_cli.reader import iter_edges, load_graph, parse_edge_line, read_edges


class TestParseEdgeLine:
    """Tests for parse_edge_line."""

    def test_two_fields(self):
        assert parse_edge_line("a b") == ("a", "b")
        assert parse_edge_line("  a\t\tb  \n") == ("a", "b")

    @pytest.mark.parametrize("line", ["", "   ", "\n", "#", "# a longer comment", "#only-one-field"])
    def test_blank_and_comment_lines_are_skipped(self, line):
        assert parse_edge_line(line) is None

    @pytest.mark.parametrize(
        "line, expected",
        [("#1 a", ("#1", "a")), ("a #b", ("a", "#b")), ("# x", ("#", "x"))],
    )
    def test_two_fields_are_an_edge_even_with_hash_names(self, line, expected):
        assert parse_edge_line(line) == expected

    @pytest.mark.parametrize("line", ["a", "a b c", "a b # trailing"])
    def test_wrong_field_count_raises(self, line):
        with pytest.raises(EdgeListError) as exc_info:
            parse_edge_line(line, 7, "edges.txt")

        assert exc_info.value.line_no == 7
        assert exc_info.value.source == "edges.txt"
        assert "edges.txt:7" in str(exc_info.value)


class TestIterEdges:
    """Tests for iterating over many lines."""

    def test_skips_blanks(self):
        lines = ["a b\n", "\n", "b c\n"]
        assert list(iter_edges(lines)) == [("a", "b"), ("b", "c")]

    def test_hash_prefixed_names_become_nodes(self):
        graph = load_graph(["a b", "#1 a", "b c"])

        assert graph.node_count == 4
        assert "#1" in graph
        assert graph.diameter() == 3

    def test_reports_line_number(self):
        with pytest.raises(EdgeListError) as exc_info:
            list(iter_edges(["a b", "", "c"]))
        assert exc_info.value.line_no == 3


class TestReadEdges:
    """Tests for file-backed reading."""

    def test_read_fixture(self, fixtures_dir: Path):
        edges = list(read_edges(fixtures_dir / "path.txt"))
        assert edges == [("a", "b"), ("b", "c"), ("c", "d")]

    def test_malformed_fixture(self, fixtures_dir: Path):
        with pytest.raises(EdgeListError) as exc_info:
            list(read_edges(fixtures_dir / "malformed.txt"))
        assert exc_info.value.line_no == 2

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(FileNotFoundError):
            list(read_edges(temp_dir / "nope.txt"))

    def test_invalid_utf8_is_an_edge_list_error(self, temp_dir: Path):
        path = temp_dir / "bad.txt"
        path.write_bytes(b"a b\n\xff\xfe c\n")

        with pytest.raises(EdgeListError) as exc_info:
            list(read_edges(path))

        assert "not valid UTF-8" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestLoadGraph:
    """Tests for building graphs from readers."""

    def test_from_path(self, fixtures_dir: Path):
        graph = load_graph(fixtures_dir / "two_triangles.txt")
        assert graph.node_count == 5
        assert graph.edge_count == 6
        assert graph.diameter() == 2

    def test_from_str_path(self, fixtures_dir: Path):
        assert load_graph(str(fixtures_dir / "path.txt")).diameter() == 3

    def test_from_lines(self):
        graph = load_graph(["a b", "b c", "c d", "a d"])
        assert graph.diameter() == 2

    def test_empty_input(self, write_edges):
        assert load_graph(write_edges("\n\n")).diameter() == 0
