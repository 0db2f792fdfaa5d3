"""Navigation tree of the Polynomial Calculator documentation site."""

from __future__ import annotations

from functools import lru_cache

from .nodes import NavNode, NavTree

README_PAGE = "md__r_e_a_d_m_e.html"

SYNCONMSG = "нажмите на выключить для синхронизации панелей"
SYNCOFFMSG = "нажмите на включить для синхронизации панелей"


def _leaf(label: str, link: str | None) -> NavNode:
    return NavNode(label, link, None)


def _section(label: str, link: str | None, *children: NavNode) -> NavNode:
    return NavNode(label, link, tuple(children))


def _readme(label: str, anchor: int) -> NavNode:
    return _leaf(label, f"{README_PAGE}#autotoc_md{anchor}")


def _build_roots() -> tuple[NavNode, ...]:
    readme = _section(
        "README", README_PAGE,
        _section(
            "Polynomial_calc", f"{README_PAGE}#autotoc_md0",
            _readme("Getting started", 1),
            _readme("Add your files", 2),
            _readme("Integrate with your tools", 3),
            _readme("Collaborate with your team", 4),
            _readme("Test and Deploy", 5),
        ),
        _section(
            "Editing this README", f"{README_PAGE}#autotoc_md6",
            _readme("Suggestions for a good README", 7),
            _readme("Name", 8),
            _readme("Description", 9),
            _readme("Badges", 10),
            _readme("Visuals", 11),
            _readme("Installation", 12),
            _readme("Usage", 13),
            _readme("Support", 14),
            _readme("Roadmap", 15),
            _readme("Contributing", 16),
            _readme("Authors and acknowledgment", 17),
            _readme("License", 18),
            _readme("Project status", 19),
        ),
        # Long headings arrive truncated with a trailing "...".
        _readme(
            "If you have run out of energy or time for your project, "
            "put a note at the top of the README saying th...",
            20,
        ),
        _readme("Polynomial-calc-", 21),
    )

    classes = _section(
        "Классы", "annotated.html",
        NavNode("Классы", "annotated.html", "annotated_dup"),
        _leaf("Алфавитный указатель классов", "classes.html"),
        _section(
            "Члены классов", "functions.html",
            _leaf("Указатель", "functions.html"),
            _leaf("Функции", "functions_func.html"),
            _leaf("Переменные", "functions_vars.html"),
            _leaf("Относящиеся к классу:", "functions_rela.html"),
        ),
    )

    files = _section(
        "Файлы", "files.html",
        NavNode("Файлы", "files.html", "files_dup"),
        _section(
            "Список членов всех файлов", "globals.html",
            _leaf("Указатель", "globals.html"),
            _leaf("Функции", "globals_func.html"),
            _leaf("Определения типов", "globals_type.html"),
        ),
    )

    return (_section("Polynomial Calculator", "index.html", readme, classes, files),)


@lru_cache(maxsize=None)
def default_tree() -> NavTree:
    """The documentation site's navigation tree as generated."""
    return NavTree(
        roots=_build_roots(),
        index=("annotated.html",),
        sync_on_message=SYNCONMSG,
        sync_off_message=SYNCOFFMSG,
    )
