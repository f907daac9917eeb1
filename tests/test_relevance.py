from __future__ import annotations

from wallparser.models import Comment
from wallparser.relevance import RelevanceClassifier, is_relevant, is_relevant_post


def test_shared_stem_is_relevant():
    assert is_relevant("посадка деревьев у школы", ["посадка"]) is True


def test_no_shared_stem_is_not_relevant():
    assert is_relevant("сегодня солнечно", ["посадка"]) is False


def test_inflected_text_matches_keyword():
    assert is_relevant("Приходите на посадку!", ["посадка"]) is True


def test_any_keyword_is_enough():
    c = RelevanceClassifier(["субботник", "посадка"])
    assert c.is_relevant("Субботник в субботу")
    assert c.is_relevant("посадки во дворе")
    assert not c.is_relevant("концерт в пятницу")


def test_empty_keywords_never_match():
    assert is_relevant("посадка деревьев", []) is False
    assert is_relevant("", ["посадка"]) is False


def test_relevant_comment_makes_post_relevant():
    comments = [Comment(text="отличная погода"), Comment(text="когда посадка?")]
    assert is_relevant_post("сегодня солнечно", comments, ["посадка"]) is True


def test_irrelevant_post_and_comments():
    comments = [Comment(text="отличная погода", emojis=["😊"])]
    assert is_relevant_post("сегодня солнечно", comments, ["посадка"]) is False


def test_post_relevance_stops_at_first_match():
    class _ExplodingComments:
        def __iter__(self):
            yield Comment(text="посадка")
            raise AssertionError("comments after the first match must not be read")

    c = RelevanceClassifier(["посадка"])
    assert c.is_relevant_post("ничего", _ExplodingComments()) is True
    assert c.is_relevant_post("посадка", _ExplodingComments()) is True


def test_blank_keywords_have_no_stems():
    assert not RelevanceClassifier(["", "..."]).has_keywords
    assert RelevanceClassifier(["", "посадка"]).has_keywords
