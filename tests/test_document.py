import io
import re

import click
import pytest

from clidocs_project.markdown_tree.core import HelpStyle, Stack
from clidocs_project.markdown_tree.document import fence_for, markdown, markdown_for, render

import sample_cli
from sample_cli import SIMPLE_LONG_HELP

HEADING = re.compile(r"^(#+)((?: `[^`]+`)+)$", re.M)


def _headings(md):
    return [(len(m.group(1)), re.findall(r"`([^`]+)`", m.group(2))) for m in HEADING.finditer(md)]


def test_single_command_document():
    md = markdown(sample_cli.simple)
    assert md == "# `simple`\n```text\n" + SIMPLE_LONG_HELP + "\n```"
    assert "Usage: simple [OPTIONS] --switch <SWITCH> <POS> [OPT_POS]" in md
    assert not md.startswith("\n") and not md.endswith("\n")


def test_cargo_document():
    expected = "\n".join([
        "# `cargo`",
        "```text",
        "Rust's package manager",
        "",
        "Usage: cargo <COMMAND>",
        "",
        "Commands:",
        "  build  Compile a local package and all of its dependencies",
        "  run    Run a binary or example of the local package",
        "  clean  Remove artifacts that cargo has generated in the past",
        "```",
        "",
        "## `cargo` `build`",
        "```text",
        "Compile a local package and all of its dependencies",
        "",
        "Usage: cargo build [OPTIONS]",
        "",
        "Options:",
        "  -r, --release",
        "          Build artifacts in release mode, with optimizations",
        "```",
        "",
        "## `cargo` `run`",
        "```text",
        "Run a binary or example of the local package",
        "",
        "Usage: cargo run [ARGS]...",
        "",
        "Arguments:",
        "  [ARGS]...",
        "```",
        "",
        "## `cargo` `clean`",
        "```text",
        "Remove artifacts that cargo has generated in the past",
        "",
        "Usage: cargo clean",
        "```",
    ])
    assert markdown(sample_cli.cargo) == expected


def test_heading_depth_matches_tree_depth():
    md = markdown(sample_cli.tool)
    assert _headings(md) == [
        (1, ["tool"]),
        (2, ["tool", "remote"]),
        (3, ["tool", "remote", "add"]),
        (2, ["tool", "branch"]),
        (3, ["tool", "branch", "add"]),
    ]
    assert "Usage: tool remote add <URL>" in md
    assert "Usage: tool branch add [OPTIONS]" in md


def test_siblings_keep_declaration_order():
    md = markdown(sample_cli.order)
    assert [path[-1] for _, path in _headings(md)] == ["order", "zeta", "alpha", "mid"]


def test_exactly_one_blank_line_between_sections():
    md = markdown(sample_cli.tool)
    lines = md.split("\n")
    starts = [i for i, ln in enumerate(lines) if ln.startswith("#")]
    assert starts[0] == 0
    for i in starts[1:]:
        assert lines[i - 1] == ""
        assert lines[i - 2] == "```"


def test_render_appends_to_an_existing_buffer():
    buf = io.StringIO()
    buf.write("preamble")
    render(buf, Stack.empty().pushed("cargo"), sample_cli.cargo.commands["clean"])
    assert buf.getvalue().startswith("preamble\n\n## `cargo` `clean`\n```text\n")
    assert "Usage: cargo clean" in buf.getvalue()


def test_root_name_override_does_not_rename_the_command():
    md = markdown(sample_cli.cargo, name="cargo-nightly")
    assert md.startswith("# `cargo-nightly`\n")
    assert "## `cargo-nightly` `run`" in md
    assert "Usage: cargo-nightly run [ARGS]..." in md
    assert sample_cli.cargo.name == "cargo"


def test_rendering_does_not_mutate_the_tree():
    before = {name: cmd.add_help_option for name, cmd in sample_cli.cargo.commands.items()}
    markdown(sample_cli.cargo)
    markdown(sample_cli.cargo, style=HelpStyle.click)
    assert sample_cli.cargo.add_help_option is True
    assert {n: c.add_help_option for n, c in sample_cli.cargo.commands.items()} == before


def test_click_style_document():
    md = markdown(sample_cli.cargo, style=HelpStyle.click)
    assert [p for _, p in _headings(md)] == [
        ["cargo"], ["cargo", "build"], ["cargo", "run"], ["cargo", "clean"],
    ]
    assert "Usage: cargo run [OPTIONS] [ARGS]..." in md
    assert "--help" not in md


@pytest.mark.parametrize("target", [
    sample_cli.cargo,
    sample_cli.cargo_factory,
])
def test_markdown_for_accepts_commands_and_factories(target):
    assert markdown_for(target) == markdown(sample_cli.cargo)


def test_markdown_for_typer_app():
    md = markdown_for(sample_cli.typer_app, name="tyapp")
    assert _headings(md) == [(1, ["tyapp"]), (2, ["tyapp", "greet"]), (2, ["tyapp", "leave"])]
    assert "Usage: tyapp <COMMAND>" in md
    assert "Usage: tyapp greet [OPTIONS] <WHO>" in md
    assert "--install-completion" not in md


def test_help_containing_a_fence_gets_a_longer_fence():
    @click.command(name="fenced")
    def fenced():
        """Example:

        \b
        ```
        fenced --now
        ```
        """

    md = markdown(fenced)
    assert md.startswith("# `fenced`\n````text\n")
    assert md.endswith("\n````")


def test_fence_for():
    assert fence_for("plain") == "```"
    assert fence_for("a ``` b") == "````"
    assert fence_for("a ````` b") == "``````"


def test_nested_typer_tree():
    md = markdown_for(sample_cli.proj_app)
    assert _headings(md) == [
        (1, ["proj"]),
        (2, ["proj", "serve"]),
        (2, ["proj", "db"]),
        (3, ["proj", "db", "migrate"]),
        (3, ["proj", "db", "seed"]),
    ]
    assert "Usage: proj <COMMAND>" in md
    assert "Usage: proj db <COMMAND>" in md
    assert "Usage: proj db migrate [REVISION]" in md
    assert "--install-completion" not in md


def test_unnamed_root_needs_a_name():
    with pytest.raises(ValueError, match="no name"):
        markdown_for(sample_cli.unnamed_app)
    md = markdown_for(sample_cli.unnamed_app, name="steps")
    assert _headings(md) == [(1, ["steps"]), (2, ["steps", "first"]), (2, ["steps", "second"])]
    assert "# ``" not in md
