from hypothesis import given, strategies as st

from contestkit.manacher import longest_palindrome_length


def _naive(t):
    return max((j - i for i in range(len(t)) for j in range(i + 1, len(t) + 1)
                if t[i:j] == t[i:j][::-1]), default=0)


@given(st.text(alphabet="abc", max_size=15))
def test_matches_naive(t):
    assert longest_palindrome_length(t) == _naive(t)


def test_whole_palindrome():
    assert longest_palindrome_length("racecar") == len("racecar")


def test_empty():
    assert longest_palindrome_length("") == 0