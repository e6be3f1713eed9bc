import pytest


@pytest.fixture
def make_project(tmp_path):
    """Write ``{rel_path: content}`` under a temporary project root."""
    def _make(files):
        for rel_path, content in files.items():
            path = tmp_path / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path
    return _make


CYCLIC_PROJECT = {
    "src/a.ts": 'import { helper } from "./lib/helper";\nimport { b } from "./b";\n',
    "src/b.ts": 'import { a } from "./a";\nexport const b = 1;\n',
    "src/lib/helper.ts": "export const helper = () => 1;\n",
    "components/List.tsx": "export const List = ({ items }) => items.map((x, i) => <li key={i}>{x}</li>);\n",
}


@pytest.fixture
def cyclic_project(make_project):
    return make_project(CYCLIC_PROJECT)
