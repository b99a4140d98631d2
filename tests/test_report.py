from webgopher.report import PageCount, print_report, sort_report


def test_sort_by_count_then_url():
    pages = {
        "https://wagslane.dev": 5,
        "https://wagslane.dev/about": 7,
        "https://wagslane.dev/tags": 3,
        "https://wagslane.dev/index.html": 3,
    }
    assert sort_report(pages) == [
        PageCount("https://wagslane.dev/about", 7),
        PageCount("https://wagslane.dev", 5),
        PageCount("https://wagslane.dev/index.html", 3),
        PageCount("https://wagslane.dev/tags", 3),
    ]


def test_sort_with_same_counts():
    pages = {
        "https://wagslane.dev": 5,
        "https://wagslane.dev/about": 5,
        "https://wagslane.dev/tags": 5,
    }
    assert sort_report(pages) == [
        PageCount("https://wagslane.dev", 5),
        PageCount("https://wagslane.dev/about", 5),
        PageCount("https://wagslane.dev/tags", 5),
    ]


def test_sort_empty():
    assert sort_report({}) == []


def test_print_report(capsys):
    print_report({"https://wagslane.dev": 5, "https://wagslane.dev/about": 7}, "https://wagslane.dev")
    lines = capsys.readouterr().out.splitlines()
    assert "REPORT for https://wagslane.dev" in lines
    assert lines[-2:] == [
        "Found 7 internal links to https://wagslane.dev/about",
        "Found 5 internal links to https://wagslane.dev",
    ]