"""Tests for the text normalizer and the bibliographic field extractors."""

from datetime import date

import pytest

from papermeta.model.metadata import MAX_ABSTRACT_LENGTH, MAX_AUTHORS
from papermeta.steps.metadata.extractors import (
    extract_abstract,
    extract_authors,
    extract_doi,
    extract_journal,
    extract_publication_date,
    extract_title,
)
from papermeta.steps.metadata.normalizer import normalize_text


def _norm(text):
    return normalize_text(text)


class TestNormalizer:

    def test_lines_are_trimmed_and_empty_lines_kept(self):
        normalized = _norm("  first line  \n\n second\r\n")

        assert normalized.lines == ("first line", "", "second", "")
        assert normalized.text == "  first line  \n\n second\r\n"

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text):
        normalized = _norm(text)

        assert normalized.lines == ()
        assert normalized.text == ""

    def test_bytes_are_decoded(self):
        normalized = _norm("Café Culture Studies\nJohn Smith".encode("utf-8"))

        assert normalized.lines == ("Café Culture Studies", "John Smith")

    def test_undecodable_bytes_are_replaced(self):
        normalized = _norm(b"Broken \xff byte line")

        assert normalized.lines == ("Broken \ufffd byte line",)

    @pytest.mark.parametrize("value", [42, ["a list"], object()])
    def test_non_text_is_empty(self, value):
        assert _norm(value).lines == ()

    def test_head(self):
        assert _norm("a\nb\nc").head(2) == ("a", "b")


class TestExtractTitle:

    def test_first_title_like_line_wins(self, sample_paper_text):
        assert extract_title(_norm(sample_paper_text)) == "A Heuristic Approach to Protein Structure Prediction"

    def test_all_uppercase_line_is_skipped(self):
        text = "DEEP LEARNING FOR PROTEINS\nDeep learning for protein folding"
        assert extract_title(_norm(text)) == "Deep learning for protein folding"

    def test_uppercase_section_heading_never_title(self):
        assert extract_title(_norm("INTRODUCTION\nINTRODUCTION AND SCOPE")) is None

    @pytest.mark.parametrize("line", [
        "Short one",  # too short
        "1. Numbered list entry here",
        "12. Another numbered entry",
        "Abstract of this particular paper",
        "introduction to the main problem",
        "Conclusion and future work items",
        "NoWhitespaceButLongEnoughToBeATitle",
        "ab " * 70,  # 209 characters once trimmed
    ])
    def test_rejected_lines(self, line):
        assert extract_title(_norm(line)) is None

    def test_length_bounds_are_exclusive(self):
        assert extract_title(_norm("abcd efghi")) is None  # 10 characters
        assert extract_title(_norm("abcd efghij")) == "abcd efghij"
        long_title = "a " * 99 + "b"  # 199 characters
        assert extract_title(_norm(long_title)) == long_title

    def test_only_first_ten_lines_scanned(self):
        text = "\n" * 10 + "A title placed far too low"
        assert extract_title(_norm(text)) is None

    def test_surrounding_whitespace_is_trimmed(self):
        assert extract_title(_norm("   Learning to rank documents   \n")) == "Learning to rank documents"


class TestExtractAuthors:

    def test_name_lines_in_order(self, sample_paper_text):
        assert extract_authors(_norm(sample_paper_text)) == ("John Smith", "Jane Doe")

    def test_capped_at_five(self):
        names = ["Alice Adams", "Bob Brown", "Carol Clark", "Dave Davis", "Eve Evans", "Frank Fox", "Grace Green"]
        authors = extract_authors(_norm("\n".join(names)))

        assert len(authors) == MAX_AUTHORS
        assert authors == tuple(names[:5])

    def test_section_keywords_are_not_authors(self):
        text = "Abstract Summary\nIntroduction Part\nConclusion Remarks\nMary Major"
        assert extract_authors(_norm(text)) == ("Mary Major",)

    def test_whole_line_is_kept(self):
        assert extract_authors(_norm("Ada Lovelace, University of London")) == ("Ada Lovelace, University of London",)

    def test_only_first_twenty_lines_scanned(self):
        text = "\n" * 20 + "Late Author"
        assert extract_authors(_norm(text)) == ()

    def test_no_match_is_empty(self):
        assert extract_authors(_norm("")) == ()
        assert extract_authors(_norm("lowercase name\nA Single\nJOHN SMITH")) == ()


class TestExtractAbstract:

    def test_abstract_up_to_keywords(self, sample_paper_text):
        assert extract_abstract(_norm(sample_paper_text)) == (
            "We present a new method for predicting protein structures.\n"
            "The method outperforms prior work."
        )

    def test_abstract_up_to_introduction(self):
        text = "ABSTRACT\nWe study graphs.\nIntroduction\nGraphs are everywhere."
        assert extract_abstract(_norm(text)) == "We study graphs."

    def test_abstract_up_to_numbered_section(self):
        assert extract_abstract(_norm("Abstract - Short summary. 1. Background")) == "- Short summary."

    def test_key_words_marker(self):
        assert extract_abstract(_norm("abstract: Text here. Key words: a, b")) == "Text here."

    def test_truncated(self):
        text = "Abstract: " + "x" * 1500 + " Introduction"
        abstract = extract_abstract(_norm(text))

        assert len(abstract) == MAX_ABSTRACT_LENGTH

    def test_missing_terminator(self):
        assert extract_abstract(_norm("Abstract: a summary with no end marker")) is None

    def test_no_abstract(self):
        assert extract_abstract(_norm("Nothing to see here")) is None


class TestExtractDoi:

    def test_label_is_stripped(self):
        assert extract_doi(_norm("DOI: 10.1000/xyz123")) == "10.1000/xyz123"

    @pytest.mark.parametrize("text,expected", [
        ("doi:10.5555/ABC.def more text", "10.5555/ABC.def"),
        ("See doi 10.1145/3292500.3330701\nnext line", "10.1145/3292500.3330701"),
        ("Doi : 10.1038/nature12373", "10.1038/nature12373"),
    ])
    def test_label_variants(self, text, expected):
        assert extract_doi(_norm(text)) == expected

    def test_bare_doi_without_label_not_matched(self):
        assert extract_doi(_norm("https://example.org/10.1000/xyz")) is None

    def test_full_width_registrant_not_matched(self):
        assert extract_doi(_norm("doi: 10.１０００/xyz")) is None

    def test_no_doi(self, sample_paper_text):
        assert extract_doi(_norm("No identifier")) is None
        assert extract_doi(_norm(sample_paper_text)) == "10.1038/s41592-021-01234-5"


class TestExtractPublicationDate:

    def test_japanese_notation_has_priority(self):
        text = "Received 2023-06-07. 発行 2023年5月"
        assert extract_publication_date(_norm(text)) == date(2023, 5, 1)

    def test_japanese_notation_with_spaces(self):
        assert extract_publication_date(_norm("2019 年 12 月")) == date(2019, 12, 1)

    @pytest.mark.parametrize("text,expected", [
        ("Received 2021-03-15", date(2021, 3, 15)),
        ("Accepted 2020/7/4", date(2020, 7, 4)),
        ("Dated 2018 11 30", date(2018, 11, 30)),
    ])
    def test_numeric_formats(self, text, expected):
        assert extract_publication_date(_norm(text)) == expected

    def test_dash_format_beats_space_format(self):
        assert extract_publication_date(_norm("2018 11 30 and 2022-01-02")) == date(2022, 1, 2)

    def test_zero_components_default_to_one(self):
        assert extract_publication_date(_norm("2023-00-00")) == date(2023, 1, 1)

    def test_overflowing_components_roll_over(self):
        assert extract_publication_date(_norm("2023-13-05")) == date(2024, 1, 5)
        assert extract_publication_date(_norm("2023/04/31")) == date(2023, 5, 1)

    def test_unrepresentable_year(self):
        assert extract_publication_date(_norm("0000-01-01")) is None

    def test_full_width_digits_are_not_dates(self):
        assert extract_publication_date(_norm("２０２３年５月")) is None
        assert extract_publication_date(_norm("２０２３年５月 2022-01-02")) == date(2022, 1, 2)

    def test_no_date(self):
        assert extract_publication_date(_norm("Published long ago")) is None


class TestExtractJournal:

    def test_published_in_has_priority(self):
        text = "Journal of Computing, 2020\nPublished in XYZ Magazine"
        assert extract_journal(_norm(text)) == "XYZ Magazine"

    def test_journal_of(self):
        assert extract_journal(_norm("Journal of Computing, 2020")) == "Computing"

    def test_journal_of_beats_proceedings_of(self):
        text = "In Proceedings of the ACM Conference, 2019. Journal of Systems, vol 3"
        assert extract_journal(_norm(text)) == "Systems"

    def test_proceedings_of(self):
        text = "In Proceedings of the ACM Conference, pages 1-10"
        assert extract_journal(_norm(text)) == "the ACM Conference"

    def test_case_insensitive(self, sample_paper_text):
        assert extract_journal(_norm("PUBLISHED IN Science Advances, 2020")) == "Science Advances"
        assert extract_journal(_norm(sample_paper_text)) == "Nature Methods"

    def test_no_journal(self):
        assert extract_journal(_norm("A preprint")) is None
