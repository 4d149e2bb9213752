# docs/_gen_cli_docs.py
from __future__ import annotations
import sys
from pathlib import Path

# Ensure repo root on sys.path so imports work when building docs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from clidocs_project.cli.clidocsctl import app  # noqa: E402
from clidocs_project.markdown_tree import markdown_for, write_text  # noqa: E402

OUT = ROOT / "docs" / "cli.md"


def main() -> None:
    md = markdown_for(app, name="clidocsctl")
    write_text(OUT, md + "\n")
    print(f"wrote {OUT}")


if __name__ == "__main__":
    main()
