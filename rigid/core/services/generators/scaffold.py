"""
Prototype scaffold generator — the static micro template.

Produces an HTML/CSS/JS skeleton under ``app/`` plus license, package
manifests and editor/git configuration at the root. Templates are plain
strings with ``__PLACEHOLDER__`` markers, filled by ``render()``.
"""

from __future__ import annotations

import json
import re

from rigid.core.models.template import GeneratedFile, ScaffoldAnswers

# Empty folders created before any file is written.
DIRECTORIES = ("app", "app/js", "app/css", "app/img")

_PLACEHOLDER = re.compile(r"__([A-Z][A-Z0-9_]*)__")


def render(template: str, values: dict[str, str]) -> str:
    """Replace ``__NAME__`` markers with ``values['NAME']``.

    Unknown markers are left untouched so that template text which
    happens to contain double underscores survives.
    """

    def _sub(m: re.Match) -> str:
        return values.get(m.group(1), m.group(0))

    return _PLACEHOLDER.sub(_sub, template)


# ── Templated files ─────────────────────────────────────────────

_LICENSE = """\
The MIT License (MIT)

Copyright (c) __YEAR__ __AUTHOR__

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

_INDEX_HTML = """\
<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>__PROJECT_NAME__</title>
    <link rel="stylesheet" href="bower_components/normalize-css/normalize.css">
    <link rel="stylesheet" href="css/style.css">
  </head>
  <body>
    <h1>__PROJECT_NAME__</h1>

    <script src="bower_components/jquery/dist/jquery.js"></script>
    <script src="js/main.js"></script>
  </body>
</html>
"""

_MAIN_JS = """\
/* __PROJECT_NAME__ */
(function ($) {
  'use strict';

  $(function () {
    console.log('__PROJECT_NAME__ ready');
  });
}(window.jQuery));
"""

_GRUNTFILE = """\
'use strict';

module.exports = function (grunt) {
  require('load-grunt-tasks')(grunt);

  grunt.initConfig({
    jshint: {
      options: {
        jshintrc: '.jshintrc'
      },
      all: ['Gruntfile.js', 'app/js/**/*.js']
    },
    connect: {
      server: {
        options: {
          port: 9000,
          base: 'app',
          livereload: 35729,
          open: true
        }
      }
    },
    watch: {
      options: {
        livereload: 35729
      },
      files: ['app/**/*.html', 'app/css/**/*.css', 'app/js/**/*.js'],
      tasks: ['jshint']
    }
  });

  grunt.registerTask('serve', ['connect:server', 'watch']);
  grunt.registerTask('default', ['jshint']);
};
"""

_STYLE_CSS = """\
body {
  font-family: "Helvetica Neue", Helvetica, Arial, sans-serif;
  margin: 2em auto;
  max-width: 960px;
  padding: 0 1em;
  color: #333;
}
"""

_BOWERRC = """\
{
  "directory": "app/bower_components"
}
"""

_EDITORCONFIG = """\
# editorconfig.org
root = true

[*]
indent_style = space
indent_size = 2
end_of_line = lf
charset = utf-8
trim_trailing_whitespace = true
insert_final_newline = true

[*.md]
trim_trailing_whitespace = false
"""

_GITATTRIBUTES = """\
* text=auto
"""

_GITIGNORE = """\
node_modules
app/bower_components
.tmp
.sass-cache
.DS_Store
"""

_JSHINTRC = """\
{
  "node": true,
  "browser": true,
  "esnext": true,
  "bitwise": true,
  "camelcase": true,
  "curly": true,
  "eqeqeq": true,
  "immed": true,
  "indent": 2,
  "latedef": true,
  "newcap": true,
  "noarg": true,
  "quotmark": "single",
  "undef": true,
  "unused": true,
  "strict": true,
  "trailing": true,
  "smarttabs": true,
  "jquery": true
}
"""


def _package_json(answers: ScaffoldAnswers, slug: str) -> str:
    data: dict = {
        "name": slug,
        "version": "0.0.0",
        "private": True,
        "license": "MIT",
        "devDependencies": {
            "grunt": "^1.6.1",
            "grunt-contrib-connect": "^4.0.0",
            "grunt-contrib-jshint": "^3.2.0",
            "grunt-contrib-watch": "^1.1.0",
            "load-grunt-tasks": "^5.1.0",
        },
        "scripts": {
            "start": "grunt serve",
            "test": "grunt jshint",
        },
    }
    if answers.author:
        data["author"] = answers.author
    return json.dumps(data, indent=2) + "\n"


def _bower_json(slug: str) -> str:
    data = {
        "name": slug,
        "version": "0.0.0",
        "private": True,
        "dependencies": {
            "jquery": "^3.7.1",
            "normalize-css": "^8.0.1",
        },
    }
    return json.dumps(data, indent=2) + "\n"


def package_slug(project_name: str) -> str:
    """npm/bower-safe package name: lowercase, dash separated."""
    slug = re.sub(r"[^a-z0-9._-]+", "-", project_name.strip().lower()).strip("-.")
    return slug or "prototype"


# ── Generator ───────────────────────────────────────────────────


def generate(answers: ScaffoldAnswers) -> list[GeneratedFile]:
    """Produce every scaffold file for ``answers``.

    Args:
        answers: Project name, author, year, GitHub choices.

    Returns:
        List of GeneratedFile, in write order.
    """
    slug = package_slug(answers.project_name)
    values = {
        "PROJECT_NAME": answers.project_name,
        "AUTHOR": answers.author or answers.project_name,
        "YEAR": str(answers.year),
    }

    def _tpl(path: str, template: str, reason: str) -> GeneratedFile:
        return GeneratedFile(path=path, content=render(template, values), reason=reason)

    def _copy(path: str, content: str, reason: str) -> GeneratedFile:
        return GeneratedFile(path=path, content=content, reason=reason)

    return [
        _tpl("LICENSE", _LICENSE, "MIT license"),
        GeneratedFile(path="bower.json", content=_bower_json(slug), reason="Bower manifest"),
        _tpl("app/index.html", _INDEX_HTML, "Page skeleton"),
        _tpl("app/js/main.js", _MAIN_JS, "Script entry point"),
        GeneratedFile(path="package.json", content=_package_json(answers, slug), reason="npm manifest"),
        _copy("Gruntfile.js", _GRUNTFILE, "Lint, serve and live reload tasks"),
        _copy("app/css/style.css", _STYLE_CSS, "Base stylesheet"),
        _copy(".bowerrc", _BOWERRC, "Bower install directory"),
        _copy(".editorconfig", _EDITORCONFIG, "Editor settings"),
        _copy(".gitattributes", _GITATTRIBUTES, "Line ending normalization"),
        _copy(".gitignore", _GITIGNORE, "Ignore installed dependencies"),
        _copy(".jshintrc", _JSHINTRC, "JSHint rules"),
    ]
