from anagrams.letters import Query
from anagrams.models import RankedAnagram
from anagrams.solver.ranking import rank, rank_key
from anagrams.store import WordStore


def test_rank_orders_by_score_then_text():
    store = WordStore(Query("listen"))
    store.bucket(6).update(
        {"tinsel": 36, "in lets": 20, "silent": 36, "lens it": 20, "enlist": 36}
    )

    assert rank(store) == [
        RankedAnagram("enlist", 36),
        RankedAnagram("silent", 36),
        RankedAnagram("tinsel", 36),
        RankedAnagram("in lets", 20),
        RankedAnagram("lens it", 20),
    ]


def test_rank_keeps_only_exact_anagrams():
    store = WordStore(Query("listen"))
    store.bucket(6).update({"silent": 36, "xxxxxx": 36})
    store.bucket(5).update({"inlet": 25})

    assert rank(store) == [("silent", 36)]


def test_rank_empty_store():
    assert rank(WordStore(Query("listen"))) == []


def test_rank_is_recomputable(eat_store):
    assert rank(eat_store) == rank(eat_store)


def test_rank_key():
    assert rank_key(RankedAnagram("b", 9)) < rank_key(RankedAnagram("a", 4))
    assert rank_key(RankedAnagram("a", 4)) < rank_key(RankedAnagram("b", 4))
