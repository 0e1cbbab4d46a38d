"""
Tests for the flomo HTML importer.
"""

from conftest import SAMPLE_MEMOS, export_page, memo_html

from flomo_importer.importers import FlomoHTMLImporter, extract
from flomo_importer.markup.highlight import HIGHLIGHT_PLACEHOLDER


def test_extracts_memos_in_source_order():
    core = extract(export_page(SAMPLE_MEMOS))

    assert [memo.date for memo in core.memos] == ["2024-03-31", "2024-03-31", "2024-03-30"]
    assert [memo.time for memo in core.memos] == ["10:20:30", "08:00:00", "22:15:00"]
    assert core.memos[0].title == "2024_03_31_10_20_30"
    assert core.files == {}


def test_memo_content_layout():
    memo = extract(export_page(SAMPLE_MEMOS)).memos[0]

    assert memo.content == (
        "📅 [[2024-03-31]] 10:20:30\n\n"
        f"Reading {HIGHLIGHT_PLACEHOLDER}deep work{HIGHLIGHT_PLACEHOLDER} again\n\n"
        "See \\[\\[Cal Newport\\]\\]\n"
        "![](flomo/2024-03-31/1/cover.png)"
    )
    assert memo.attachments == ["flomo/2024-03-31/1/cover.png"]


def test_highlight_is_left_as_placeholder():
    memo = extract(export_page([memo_html("2024-01-01 00:00:00", "<p><mark>x</mark></p>")])).memos[0]

    assert "==" not in memo.content
    assert "<mark>" not in memo.content
    assert memo.content.count(HIGHLIGHT_PLACEHOLDER) == 2


def test_memo_without_attachments():
    memo = extract(export_page(SAMPLE_MEMOS)).memos[2]

    assert memo.content == "📅 [[2024-03-30]] 22:15:00\n\n- milk\n- eggs"
    assert memo.attachments == []


def test_tags_skip_all_tags_entry():
    core = extract(export_page(SAMPLE_MEMOS, tags=("#reading", "#work", "#reading")))
    assert core.tags == ["#reading", "#work"]


def test_page_without_tag_select():
    page = f"<html><body>{memo_html('2024-01-01 09:00:00', '<p>hi</p>')}</body></html>"
    core = extract(page)
    assert core.tags == []
    assert len(core.memos) == 1


def test_memo_without_timestamp_is_skipped_with_warning():
    broken = '<div class="memo"><div class="content"><p>orphan</p></div></div>'
    core = extract(export_page([broken, memo_html("2024-01-02 09:00:00", "<p>kept</p>")]))

    assert len(core.memos) == 1
    assert core.memos[0].date == "2024-01-02"
    assert len(core.warnings) == 1
    assert "no timestamp" in core.warnings[0]


def test_memo_with_blank_timestamp_is_skipped():
    core = extract(export_page([memo_html("   ", "<p>blank</p>")]))
    assert core.memos == []
    assert core.warnings


def test_audio_attachments_are_collected():
    files = '<audio src="file/2024-01-01/2/voice.m4a"></audio><img src="file/2024-01-01/2/a.jpg">'
    memo = extract(export_page([memo_html("2024-01-01 12:00:00", "<p>voice</p>", files)])).memos[0]

    assert memo.attachments == ["flomo/2024-01-01/2/voice.m4a", "flomo/2024-01-01/2/a.jpg"]


def test_importer_caches_parsed_memos():
    importer = FlomoHTMLImporter(export_page(SAMPLE_MEMOS))
    first = importer.get_all_memos()
    first.clear()
    assert len(importer.get_all_memos()) == 3
