# autocorrect

A library that improves copywriting in CJK (Chinese, Japanese, Korean)
text: it adds the missing spaces between CJK characters and half-width
letters or digits, turns half-width punctuation next to CJK text into its
full-width form, and turns full-width letters and digits back into
half-width ones.

## Formatting plain text

```python
from autocorrect.formatter import format_text

format_text("部署到heroku有问题网页不能显示")
# => "部署到 heroku 有问题网页不能显示"

format_text("于3月10日开始")
# => "于 3 月 10 日开始"

format_text("测试英文,逗号Comma转换.")
# => "测试英文，逗号 Comma 转换。"
```

Text without any CJK characters is returned unchanged. Sequences common in
source code such as `%s`, `$1` or `\n` are left alone.

## The individual rules

Each step of the formatter is available on its own:

```python
from autocorrect.fullwidth import fullwidth
from autocorrect.halfwidth import halfwidth

fullwidth("你好,这是一个句子.")
# => "你好，这是一个句子。"

halfwidth("他说：我们将在１６：３２分出发去ＣＢＤ中心。")
# => "他说：我们将在16:32分出发去CBD中心。"
```

`autocorrect.strategery.Strategery` is a single spacing rule between two
kinds of characters, and `autocorrect.patterns.compile_pattern` compiles a
regular expression in which `\p{CJK}` and `\p{CJ}` stand for the CJK
scripts.

## File types

`autocorrect.types` maps file names and extensions to the kind of content
they hold:

```python
from autocorrect.types import get_file_extension, is_support_type, match_filename

get_file_extension("/foo/bar/dar.html.erb")  # => "html.erb"
is_support_type("rs")                          # => True
match_filename("index.vue")                    # => "html"
```

Unknown types give an empty string from `match_filename`.

## Lint and format results

`autocorrect.results` holds the result objects used while walking through a
document piece by piece:

- `FormatResult` collects the corrected output (`out`) and any error.
- `LintResult` collects one `LineResult` per changed line, with its line and
  column, and renders them with `to_json()`, `to_json_pretty()` or
  `to_diff()` (a line diff coloured with terminal escape codes).
- `format_or_lint(results, rule_name, part)` formats or lints one piece of
  text into either kind of result. When `rule_name` is `"comment"`, markers
  such as `autocorrect: false` / `autocorrect-disable` and
  `autocorrect: true` / `autocorrect-enable` switch correcting off or on for
  the pieces that follow.
- `FormatResult.ignore` and `LintResult.ignore` take a piece that is passed
  through untouched (and, for linting, only moves the line/column cursor).

## Ignoring files

`Ignorer` reads `.autocorrectignore` and `.gitignore` from a working
directory and tells whether a path should be skipped:

```python
from autocorrect.ignorer import Ignorer

ignorer = Ignorer("./")
ignorer.is_ignored("node_modules/some/file.js")
```

A path counts as ignored when it, or any of its parent directories, matches
a pattern.

## What this package does not do

- It has no command-line program; it is used as a library.
- It does not parse source files (HTML, Markdown, JavaScript and so on)
  into their strings, comments and text. `match_filename` tells which kind
  of file a name refers to, and `format_or_lint` handles the pieces, but
  splitting a file into pieces is left to the caller.