import random
import pytest
from gentext import create, from_random

CORPUS = "the cat sat on the mat the cat ran"


def _bigrams(text: str) -> set[tuple[str, str]]:
    words = text.lower().split()
    return set(zip(words, words[1:]))


def test_follows_the_first_occurrence_when_source_yields_zero():
    gen = create(CORPUS, 2)
    assert gen.generate(lambda: 0, 6, "the cat") == "the cat sat on the mat the cat"


def test_halts_at_end_of_text():
    gen = create(CORPUS, 2)
    assert gen.generate(lambda: 1, 10, "the cat") == "the cat ran"


def test_bigram_continuations_only_come_from_the_corpus():
    gen = create(CORPUS, 2)
    seen = set()
    for s in range(200):
        out = gen.generate(from_random(random.Random(s)), 1, "the cat")
        seen.add(out)
    assert seen == {"the cat sat", "the cat ran"}


def test_zero_budget_returns_normalized_phrase():
    gen = create(CORPUS, 2)
    assert gen.generate(lambda: 0, 0, "  the \t cat\n") == "the cat"
    assert gen.generate(lambda: 0, -3, "the cat") == "the cat"


def test_unknown_phrase_is_returned_unchanged():
    gen = create(CORPUS, 1)
    assert gen.generate(lambda: 0, 10, "zebra   giraffe") == "zebra giraffe"


def test_seed_lookup_ignores_case_but_output_keeps_it():
    gen = create(CORPUS, 2)
    assert gen.generate(lambda: 1, 10, "The  CAT") == "The CAT ran"


def test_phrase_longer_than_order_matches_all_its_words():
    gen = create(CORPUS, 1)
    assert gen.generate(lambda: 1, 10, "the cat") == "the cat ran"
    assert gen.generate(lambda: 0, 3, "the cat") == "the cat sat on the"
    assert gen.generate(lambda: 0, 3, "the on") == "the on"


def test_phrase_shorter_than_order_grows_the_context():
    gen = create(CORPUS, 2)
    assert gen.generate(lambda: 0, 3, "mat") == "mat the cat sat"


def test_last_word_has_no_continuation():
    gen = create("a b c", 1)
    assert gen.generate(lambda: 0, 5, "c") == "c"
    assert gen.generate(lambda: 0, 5, "b") == "b c"


def test_blank_phrase_is_rejected():
    gen = create(CORPUS, 2)
    with pytest.raises(ValueError):
        gen.generate(lambda: 0, 5, "  \n ")


@pytest.mark.parametrize("sampler", ["span", "reservoir"])
@pytest.mark.parametrize("order", [1, 2, 3])
def test_every_step_is_an_observed_transition(sampler, order):
    text = "It was the best of times, it was the worst of times, it was the age of wisdom"
    gen = create(text, order, sampler)
    vocab = set(text.split())
    pairs = _bigrams(text)
    for s in range(30):
        out = gen.generate(from_random(random.Random(s)), 25, "it was")
        words = out.split()
        assert words[:2] == ["it", "was"]
        assert set(words[2:]) <= vocab
        assert set(zip([w.lower() for w in words], [w.lower() for w in words[1:]])) <= pairs


@pytest.mark.parametrize("sampler", ["span", "reservoir"])
def test_same_source_values_give_same_text(sampler):
    gen = create(" ".join([CORPUS] * 3), 1, sampler)
    a = gen.generate(from_random(random.Random(42)), 20, "the")
    b = gen.generate(from_random(random.Random(42)), 20, "the")
    assert a == b
