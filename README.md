# sree

The core pieces of a terminal AI coding assistant, as a Python library:

- **Tools** the assistant can call on your behalf: read files and list
  directories, create and edit files, run shell commands with a timeout,
  search file contents with regular expressions, and find files by glob
  pattern (both honouring `.gitignore` inside a git work tree).
- **A tool registry** that describes every tool as a JSON schema ready to send
  to a model, and dispatches calls by name.
- **Conversation types**: chat messages (`sree.message`), API requests and
  content blocks (`sree.llm.messages`), and the events of a streamed model
  response (`sree.llm.streaming`), the latter two convertible to and from
  plain dictionaries.
- **A model catalogue** (`sree.llm.models.Model`) with identifiers, display
  names, context windows and output limits, plus a rough token estimator
  (`sree.llm.token_counter`).
- **Styled terminal text**: a markdown renderer with syntax-highlighted code
  blocks and boxed tables, colour themes, a spinner, diff view, file tree,
  tool-call panel, header, status bar and screen layout, all producing lines
  of styled spans that any terminal front end can draw.
- **Log setup** that writes to a rotating log file.

Python 3.10 or newer is required. The library depends on `pygments` and
`markdown-it-py`. The `bash` tool runs commands through `sh`, so it needs a
POSIX system.

## Running a tool

Tools are asynchronous. Build the default registry and call a tool by name:

```python
import asyncio

from sree.tools.defaults import create_default_registry


async def main():
    registry = create_default_registry()
    result = await registry.execute("file_read", {"path": "README.md", "start_line": 1, "end_line": 5})
    print(result.success)
    print(result.content)


asyncio.run(main())
```

Every tool returns a `ToolResult` with `success` and `content`; failures the
model should hear about (a missing file, a non-unique `old_str`, a timeout)
come back as results with `success` false. Input that does not fit the
tool's schema raises `ValueError`.

`registry.to_api_tools()` returns the name, description and input schema of
each registered tool, in the shape a model's tool configuration expects.
Asking for a tool that is not registered raises `ToolNotFoundError`.

The built-in tools are:

| Name         | What it does                                                        |
|--------------|---------------------------------------------------------------------|
| `file_read`  | Read a file with an optional line range, or list a directory        |
| `file_write` | `create`, `str_replace`, `insert` or `append` to a file             |
| `bash`       | Run a shell command (default timeout 30 s); reports exit code, stdout and stderr |
| `grep`       | Regex search across files, case-insensitive by default, at most 100 matches by default |
| `glob`       | Find files by pattern, newest first, with their sizes, at most 1000 by default |
| `web_search` | Always reports that a search API key must be configured             |

`glob` walks the current directory, so the paths it matches begin with `./`;
`*` also matches `/`, and `**` must stand as a whole path component, as in
`**/*.py`. `sree.tools.walk` offers the same walk (`walk`) and pattern test
(`glob_match`) directly.

## Rendering markdown

```python
from sree.ui.markdown import render_markdown

for line in render_markdown("# Title\n\nSome **bold** text and `code`."):
    print(line.plain())
```

Each `Line` is a sequence of `Span`s, each carrying its text and a `Style`
(foreground, background and modifiers such as bold or italic).
`render_code_block` and `render_table` can also be used on their own, and
`sree.ui.syntax.highlight_code(code, lang)` colours code with a dark palette.

## Models and themes

```python
from sree.llm.models import Model
from sree.ui.theme import Theme

model = Model.default()
print(model.display_name(), model.as_str(), model.context_window(), model.max_output())

theme = Theme.from_name("nord")
print(Theme.available_themes())
```

Unknown theme names fall back to the `dark` theme.

## Logging

`sree.logsetup.init(log_dir)` sets up logging to `sree.log` in the given
directory (by default `~/.sree/logs`) and returns the log file's path. The
root logger logs at INFO and the `sree` logger at DEBUG, unless the
`SREE_LOG` environment variable names another level. A log file that has
reached 10 MB is rotated to `sree.log.1`, older files shift up by one, and at
most five rotated files are kept.

## What this package does not do

It is a library only. There is no command to run, no interactive chat
screen that draws the rendered lines or reads keyboard input, and no client
that sends requests to a model service or receives its streamed events: the
request and event types are provided, but sending and receiving them is left
to the application. No configuration file is read, and web search is not
available.