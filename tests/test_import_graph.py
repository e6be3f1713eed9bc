"""Tests for the import graph, cycle detection and import line lookup."""

from code_health.analysis.import_graph import (
    build_import_graph,
    find_cycles,
    find_import_line,
    import_specifiers_for,
)
from code_health.models import ScannedFile


def _make_file(rel_path, content, root="/workspace"):
    return ScannedFile.from_text(f"{root}/{rel_path}", rel_path, content)


# ── Graph Builder ─────────────────────────────────────────────

class TestBuildImportGraph:
    def test_empty(self):
        assert build_import_graph([]) == {}

    def test_every_file_is_a_node(self):
        files = [
            _make_file("src/a.ts", 'import { b } from "./b";'),
            _make_file("src/b.ts", "export const b = 1;"),
        ]
        graph = build_import_graph(files)
        assert graph == {"src/a.ts": {"src/b.ts"}, "src/b.ts": set()}

    def test_unresolved_import_adds_no_edge(self):
        files = [_make_file("src/a.ts", 'import { x } from "./missing";')]
        assert build_import_graph(files) == {"src/a.ts": set()}

    def test_package_import_adds_no_edge(self):
        files = [
            _make_file("src/a.ts", 'import React from "react";'),
            _make_file("src/react.ts", ""),
        ]
        assert build_import_graph(files)["src/a.ts"] == set()

    def test_duplicate_imports_collapse(self):
        files = [
            _make_file("src/a.ts", 'import { b } from "./b";\nconst b2 = require("./b.ts");'),
            _make_file("src/b.ts", ""),
        ]
        assert build_import_graph(files)["src/a.ts"] == {"src/b.ts"}

    def test_keys_are_slash_normalized(self):
        files = [
            _make_file("src\\a.ts", 'import { b } from "./b";'),
            _make_file("src\\b.ts", ""),
        ]
        graph = build_import_graph(files)
        assert graph == {"src/a.ts": {"src/b.ts"}, "src/b.ts": set()}

    def test_index_resolution(self):
        files = [
            _make_file("src/a.ts", 'import { lib } from "./lib";'),
            _make_file("src/lib/index.ts", ""),
        ]
        assert build_import_graph(files)["src/a.ts"] == {"src/lib/index.ts"}


# ── Cycle Detector ────────────────────────────────────────────

class TestFindCycles:
    def test_empty_graph(self):
        assert find_cycles({}) == []

    def test_no_edges(self):
        assert find_cycles({"a": set(), "b": set()}) == []

    def test_two_node_cycle(self):
        graph = {"a": {"b"}, "b": {"a"}}
        assert find_cycles(graph) == [["a", "b", "a"]]

    def test_three_node_cycle(self):
        graph = {"a": {"b"}, "b": {"c"}, "c": {"a"}}
        assert find_cycles(graph) == [["a", "b", "c", "a"]]

    def test_self_loop(self):
        assert find_cycles({"a": {"a"}}) == [["a", "a"]]

    def test_dag_has_no_cycles(self):
        graph = {
            "a": {"b", "c"},
            "b": {"d"},
            "c": {"d"},
            "d": {"e"},
            "e": set(),
        }
        assert find_cycles(graph) == []

    def test_diamond_cycle_reported_once(self):
        graph = {
            "a": {"b", "c"},
            "b": {"d"},
            "c": {"d"},
            "d": {"a"},
        }
        assert find_cycles(graph) == [["a", "b", "d", "a"]]

    def test_cycle_is_path_suffix(self):
        graph = {"entry": {"a"}, "a": {"b"}, "b": {"a"}}
        assert find_cycles(graph) == [["a", "b", "a"]]

    def test_two_back_edges(self):
        graph = {"a": {"b"}, "b": {"a", "c"}, "c": {"b"}}
        assert find_cycles(graph) == [["a", "b", "a"], ["b", "c", "b"]]

    def test_disjoint_cycles(self):
        graph = {"a": {"b"}, "b": {"a"}, "x": {"y"}, "y": {"x"}}
        assert find_cycles(graph) == [["a", "b", "a"], ["x", "y", "x"]]

    def test_unknown_neighbor_ignored(self):
        graph = {"a": {"ghost"}, "b": {"b"}}
        assert find_cycles(graph) == [["b", "b"]]

    def test_cycle_nodes_and_edges_exist(self):
        graph = {"a": {"b", "c"}, "b": {"c"}, "c": {"a", "b"}}
        for cycle in find_cycles(graph):
            assert cycle[0] == cycle[-1]
            for src, dst in zip(cycle, cycle[1:]):
                assert dst in graph[src]

    def test_deep_chain_does_not_recurse(self):
        n = 5000
        graph = {f"n{i}": {f"n{i + 1}"} for i in range(n)}
        graph[f"n{n}"] = {"n0"}
        cycles = find_cycles(graph)
        assert len(cycles) == 1
        assert len(cycles[0]) == n + 2

    def test_stable_across_runs(self):
        graph = {"a": {"b", "c"}, "b": {"a"}, "c": {"a", "c"}}
        assert find_cycles(graph) == find_cycles(graph)


# ── Line Locator ──────────────────────────────────────────────

class TestFindImportLine:
    def test_specifiers_for_sibling(self):
        assert import_specifiers_for("src/a.ts", "src/b.ts") == ["./b", "./b.ts"]

    def test_specifiers_for_parent(self):
        assert import_specifiers_for("src/x/a.ts", "src/b.tsx") == ["../b", "../b.tsx"]

    def test_specifiers_for_self(self):
        assert import_specifiers_for("src/a.ts", "src/a.ts") == ["./a", "./a.ts"]

    def test_first_line(self):
        lines = ['import { b } from "./b";']
        assert find_import_line("src/a.ts", "src/b.ts", lines) == 1

    def test_after_unrelated_lines(self):
        lines = ['console.log("test");', 'import { b } from "./b";', "const x = 1;"]
        assert find_import_line("src/a.ts", "src/b.ts", lines) == 2

    def test_require(self):
        lines = ["// header", "const b = require( './b' );"]
        assert find_import_line("src/a.ts", "src/b.ts", lines) == 2

    def test_with_extension(self):
        lines = ["", 'import b from "./b.ts";']
        assert find_import_line("src/a.ts", "src/b.ts", lines) == 2

    def test_similar_names_not_matched(self):
        lines = ['import { bb } from "./bb";', 'import { b } from "./b";']
        assert find_import_line("src/a.ts", "src/b.ts", lines) == 2

    def test_index_import_not_located(self):
        lines = ['import { lib } from "./lib";']
        assert find_import_line("src/a.ts", "src/lib/index.ts", lines) is None

    def test_not_found(self):
        assert find_import_line("src/a.ts", "src/b.ts", ["const x = 1;"]) is None
