from __future__ import annotations

from wallparser.dom import parse_document
from wallparser.models import Comment
from wallparser.wall_extractor import WallExtractor

WALL_HTML = """
<html><body>
  <div class="post" id="post-1_100">
    <div class="post_header">
      <a class="author">  Школа №5  </a>
      <span class="rel_date"> вчера в 12:30 </span>
    </div>
    <div class="wall_post_text">  Посадка деревьев у школы  </div>
    <div class="page_post_sized_thumbs">
      <a href="https://example.com/photo1"></a>
      <a href="https://example.com/photo2"></a>
      <a href="https://example.com/photo1"></a>
    </div>
    <div class="replies">
      <div class="wall_reply_text">Первый комментарий</div>
      <div class="wall_reply_text">hi <img class="emoji" alt="smile"/> there</div>
      <div class="wall_reply_text">Третий<img class="emoji" alt="😊"/><img class="emoji"/></div>
    </div>
  </div>
  <div class="post" id="post-1_101">
    <div class="post_header"><a class="author">Родители</a></div>
  </div>
  <div class="post">
    <div class="wall_post_text">Без идентификатора</div>
  </div>
</body></html>
"""


def _posts():
    return WallExtractor().extract(parse_document(WALL_HTML))


def test_extract_reads_header_text_and_id():
    post = _posts()[0]
    assert post.id == "post-1_100"
    assert post.author == "Школа №5"
    assert post.date == "вчера в 12:30"
    assert post.text == "Посадка деревьев у школы"


def test_extract_keeps_image_order_and_duplicates():
    post = _posts()[0]
    assert post.images == [
        "https://example.com/photo1",
        "https://example.com/photo2",
        "https://example.com/photo1",
    ]


def test_comment_text_excludes_emoji_alt():
    comments = _posts()[0].comments
    assert comments[0].text == "Первый комментарий"
    assert comments[1].text.split() == ["hi", "there"]
    assert comments[1].emojis == ["smile"]


def test_emoji_without_alt_yields_empty_string():
    third = _posts()[0].comments[2]
    assert third.text == "Третий"
    assert third.emojis == ["😊", ""]


def test_missing_nodes_yield_empty_fields_not_errors():
    posts = _posts()
    assert len(posts) == 3

    second = posts[1]
    assert second.text == ""
    assert second.date == ""
    assert second.images == []
    assert second.comments == []

    third = posts[2]
    assert third.id == ""
    assert third.author == ""
    assert third.text == "Без идентификатора"


def test_extract_one_is_idempotent():
    extractor = WallExtractor()
    node = extractor.post_nodes(parse_document(WALL_HTML))[0]
    assert extractor.extract_one(node) == extractor.extract_one(node)


def test_direct_text_skips_html_comments():
    doc = parse_document('<div class="wall_reply_text">до<!-- скрыто --> после</div>')
    block = doc.find_all(".wall_reply_text")[0]
    assert block.direct_text() == "до после"


def test_document_without_posts_extracts_nothing():
    assert WallExtractor().extract(parse_document("<html><body><p>пусто</p></body></html>")) == []


def test_to_dict_shape():
    post = _posts()[0]
    data = post.to_dict()
    assert set(data) == {"id", "author", "date", "text", "images", "comments"}
    assert data["comments"][1] == {"text": post.comments[1].text, "emojis": ["smile"]}
    assert isinstance(post.comments[0], Comment)
