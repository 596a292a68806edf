"""
Tests for the scaffold generator and writer.
"""

import json
from pathlib import Path

from rigid.core.models.template import GeneratedFile, ScaffoldAnswers
from rigid.core.services.generators.scaffold import DIRECTORIES, generate, package_slug, render
from rigid.core.services.scaffold_ops import write_generated_file, write_scaffold

EXPECTED_FILES = {
    "LICENSE",
    "bower.json",
    "package.json",
    "Gruntfile.js",
    "app/index.html",
    "app/js/main.js",
    "app/css/style.css",
    ".bowerrc",
    ".editorconfig",
    ".gitattributes",
    ".gitignore",
    ".jshintrc",
}


def _answers(**kw) -> ScaffoldAnswers:
    kw.setdefault("project_name", "Demo App")
    kw.setdefault("year", 2024)
    return ScaffoldAnswers(**kw)


class TestRender:
    def test_replaces_known(self):
        assert render("hi __NAME__!", {"NAME": "bob"}) == "hi bob!"

    def test_keeps_unknown(self):
        assert render("__dirname __OTHER__", {}) == "__dirname __OTHER__"


class TestGenerate:
    def test_file_set(self):
        files = generate(_answers())
        assert {f.path for f in files} == EXPECTED_FILES

    def test_license_has_year_and_author(self):
        files = {f.path: f for f in generate(_answers(author="Ada"))}
        assert "Copyright (c) 2024 Ada" in files["LICENSE"].content

    def test_license_falls_back_to_project_name(self):
        files = {f.path: f for f in generate(_answers())}
        assert "Copyright (c) 2024 Demo App" in files["LICENSE"].content

    def test_index_title(self):
        files = {f.path: f for f in generate(_answers())}
        assert "<title>Demo App</title>" in files["app/index.html"].content

    def test_manifests_are_valid_json(self):
        files = {f.path: f for f in generate(_answers(author="Ada"))}
        pkg = json.loads(files["package.json"].content)
        bower = json.loads(files["bower.json"].content)
        assert pkg["name"] == "demo-app"
        assert pkg["author"] == "Ada"
        assert bower["name"] == "demo-app"
        json.loads(files[".jshintrc"].content)
        json.loads(files[".bowerrc"].content)

    def test_no_placeholders_left(self):
        for f in generate(_answers()):
            assert "__PROJECT_NAME__" not in f.content
            assert "__YEAR__" not in f.content

    def test_slug(self):
        assert package_slug("  My Cool/App ") == "my-cool-app"
        assert package_slug("!!!") == "prototype"


class TestWriteScaffold:
    def test_writes_everything(self, workdir: Path):
        result = write_scaffold(workdir, DIRECTORIES, generate(_answers()))
        assert result["ok"]
        assert set(result["written"]) == EXPECTED_FILES
        assert result["skipped"] == []
        assert (workdir / "app" / "img").is_dir()
        assert (workdir / "app" / "css" / "style.css").is_file()

    def test_existing_file_is_kept(self, workdir: Path):
        (workdir / "LICENSE").write_text("mine\n")
        result = write_scaffold(workdir, DIRECTORIES, generate(_answers()))
        assert result["skipped"] == ["LICENSE"]
        assert (workdir / "LICENSE").read_text() == "mine\n"

    def test_force_overwrites(self, workdir: Path):
        (workdir / "LICENSE").write_text("mine\n")
        result = write_scaffold(workdir, DIRECTORIES, generate(_answers()), force=True)
        assert "LICENSE" in result["written"]
        assert "MIT" in (workdir / "LICENSE").read_text()

    def test_write_error(self, workdir: Path):
        # A file where a directory is needed
        (workdir / "app").write_text("not a dir\n")
        result = write_scaffold(workdir, DIRECTORIES, generate(_answers()))
        assert "error" in result

    def test_single_file_missing_path(self, workdir: Path):
        assert "error" in write_generated_file(workdir, GeneratedFile(path="", content="x"))
