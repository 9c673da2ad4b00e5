from script.build_dictionary import parse_answers, unique_preserve_order

PAGE = """
<html><body>
<h1>Past answers</h1>
<table>
  <tr><td>2024-05-03 (Fri)</td><td>1050</td><td>CRANE</td></tr>
  <tr><td>2024-05-02 (Thu)</td><td>1049</td><td>SLATE</td></tr>
  <tr><td>2024-05-01 (Wed)</td><td>1048</td><td>CRANE</td></tr>
  <tr><td>not a row</td><td>spine</td></tr>
</table>
</body></html>
"""


def test_parse_answers_extracts_rows_in_order():
    assert parse_answers(PAGE) == ["crane", "slate"]


def test_parse_answers_empty_page():
    assert parse_answers("<html><body><p>nothing here</p></body></html>") == []


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
