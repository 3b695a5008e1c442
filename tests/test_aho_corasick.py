from hypothesis import given, strategies as st

from contestkit.aho_corasick import AhoCorasick


def test_example():
    ac = AhoCorasick(["she", "he", "say", "shr", "her"])
    assert ac.count_matches("yasherhs") == 3


@given(st.lists(st.text(alphabet="ab", min_size=1, max_size=4), max_size=10),
       st.text(alphabet="ab", max_size=30))
def test_matches_naive(patterns, text):
    ac = AhoCorasick(patterns)
    assert ac.count_matches(text) == sum(p in text for p in patterns)


def test_repeatable_queries():
    ac = AhoCorasick(["ab"])
    assert ac.count_matches("xab") == ac.count_matches("abab") == 1