"""Tests for the package-level API and original names."""


class TestOriginalNames:
    """The camelCase names behave exactly like the snake_case ones."""

    def test_aliases(self):
        import arrays

        assert arrays.bookEndList is arrays.book_end_list
        assert arrays.tripleNumbers is arrays.triple_numbers
        assert arrays.stringsToIntegers is arrays.strings_to_integers
        assert arrays.removeDollars is arrays.remove_dollars
        assert arrays.shoutIfExclaiming is arrays.shout_if_exclaiming
        assert arrays.countShortWords is arrays.count_short_words
        assert arrays.allRGB is arrays.all_rgb
        assert arrays.makeMath is arrays.make_math
        assert arrays.injectPositive is arrays.inject_positive

    def test_original_examples(self):
        from arrays import (
            bookEndList, tripleNumbers, stringsToIntegers, removeDollars,
            shoutIfExclaiming, countShortWords, allRGB, makeMath, injectPositive,
        )

        assert bookEndList([1, 2, 3]) == [1, 3]
        assert tripleNumbers([1, 2]) == [3, 6]
        assert stringsToIntegers(["1", "a"]) == [1, 0]
        assert removeDollars(["$1", "2"]) == [1, 2]
        assert shoutIfExclaiming(["Hello!", "Huh?"]) == ["HELLO!"]
        assert countShortWords(["a", "bb", "cccc"]) == 2
        assert allRGB(["red", "green", "blue"]) is True
        assert makeMath([1, 2, 3]) == "6=1+2+3"
        assert injectPositive([1, 9, -5, 7]) == [1, 9, -5, 10, 7]
