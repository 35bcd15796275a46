"""Styled terminal text: markdown, syntax highlighting, themes, header, status bar and layout."""