"""Document assembly: list grouping across paragraphs and the page shell"""

from functools import reduce
from string import Template
from typing import Iterable, NamedTuple

from artpub.core.models import BlockKind, Fragment
from artpub.core.render.tags import LIST_CLOSE, LIST_OPEN


PAGE = Template("""\
<!DOCTYPE html>
<html lang="en">

<head>
  <meta charset="utf-8">
  <title>$title</title>
  <style>
    body {
      background-color: black;
      color: white;
      margin-left: 25%;
      margin-right: 25%;
    }
    figure {
      display: block;
      margin-left: 20%;
      margin-right: 20%;
      text-align: center;
    }
    blockquote {
      color: #FFF0D8;
      background-color: #101018;
      font-style: italic;
      border-left: .2em solid #606058;
      padding-left: 1em;
    }
    blockquote:before {
      content: '“';
    }
    blockquote:after {
      content: '”';
    }
    a {
      padding-left: 0.2em;
      padding-right: 0.2em;
    }
    a:link {
      color: #40D0FF;
    }
    a:visited {
      color: #A050E0;
    }
    a:hover {
      background-color: #202020;
      border-radius: 0.4em;
    }
  </style>
</head>

<body>
$body
</body>

</html>""")


class ListFold(NamedTuple):
    """Accumulator threaded through the list-grouping fold."""
    in_list:   bool
    fragments: tuple[str, ...]


def step(fold: ListFold, fragment: Fragment) -> ListFold:
    """Advance the list state by one paragraph and emit its (possibly prefixed) html."""
    if fragment.kind is BlockKind.ULI:
        if fold.in_list:
            return ListFold(True, fold.fragments + (fragment.html,))
        return ListFold(True, fold.fragments + (LIST_OPEN + fragment.html,))
    if fold.in_list:
        return ListFold(False, fold.fragments + (LIST_CLOSE + fragment.html,))
    return ListFold(False, fold.fragments + (fragment.html,))


def group_lists(fragments: Iterable[Fragment]) -> list[str]:
    """Wrap runs of list items in <ul>; a trailing run is left open."""
    return list(reduce(step, fragments, ListFold(False, ())).fragments)


def assemble_body(lines: Iterable[str]) -> str:
    """One fragment per line, each newline-terminated."""
    return "".join(f"{line}\n" for line in lines)


def render_page(body: str, title: str) -> str:
    return PAGE.substitute(title=title, body=body)
