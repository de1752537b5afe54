# publishing/markdown/postprocessors/table_enhancer.py
"""
Postprocessor that wraps tables in a horizontally scrollable container.

Output:
    <div class="table-wrapper">
        <div class="table-scroll-wrapper">
            <table>...</table>
        </div>
    </div>
"""

from bs4 import BeautifulSoup, Tag

from .utils import get_shared_soup, soup_to_html


def _is_wrapped(table: Tag) -> bool:
    parent = table.parent
    return (
        parent is not None
        and parent.name == "div"
        and "table-scroll-wrapper" in parent.get("class", [])
    )


def _wrap_table(soup: BeautifulSoup, table: Tag) -> Tag:
    outer_wrapper = soup.new_tag("div")
    outer_wrapper["class"] = ["table-wrapper"]
    inner_wrapper = soup.new_tag("div")
    inner_wrapper["class"] = ["table-scroll-wrapper"]

    table.insert_before(outer_wrapper)
    inner_wrapper.append(table.extract())
    outer_wrapper.append(inner_wrapper)
    return outer_wrapper


def table_enhancer(html: str, context: dict) -> str:
    soup = get_shared_soup(html, context)

    for table in soup.find_all("table"):
        if not _is_wrapped(table):
            _wrap_table(soup, table)

    return soup_to_html(context, soup)


def table_enhancer_default(html: str, context: dict) -> str:
    """
    Default configuration for table_enhancer.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return table_enhancer(html, context)
