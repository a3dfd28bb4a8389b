from spellrank.utils.strings import prefix_length, shared_characters, suffix_length


def test_prefix_length():
    assert prefix_length("tree", "trees") == 4
    assert prefix_length("grant", "grace") == 3
    assert prefix_length("hammer", "hankering") == 2
    assert prefix_length("", "abc") == 0


def test_suffix_length():
    assert suffix_length("spelling", "speling") == 4
    assert suffix_length("walking", "talking") == 6
    assert suffix_length("abc", "abd") == 0


def test_shared_characters():
    assert shared_characters("cat", "cut") == 2
    assert shared_characters("cat", "cats") == 3
    assert shared_characters("abc", "xyz") == 0
