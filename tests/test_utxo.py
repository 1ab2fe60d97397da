from hellocoin.utxo import UTXO, utxo_key


def test_utxo_key_format():
    assert utxo_key("abc", 2) == "abc:2"


def test_key_property_matches_utxo_key():
    utxo = UTXO("deadbeef", 7, "alice", 12.5)
    assert utxo.key == utxo_key("deadbeef", 7)


def test_new_utxo_is_unspent():
    utxo = UTXO("tx", 0, "alice", 1.0)
    assert utxo.spent is False


def test_mark_as_spent():
    utxo = UTXO("tx", 0, "alice", 1.0)
    utxo.mark_as_spent()
    assert utxo.spent is True
    utxo.mark_as_spent()
    assert utxo.spent is True


def test_fields_are_kept():
    utxo = UTXO("tx", 3, "bob", 4.25)
    assert (utxo.transaction_id, utxo.output_index, utxo.owner, utxo.amount) == (
        "tx",
        3,
        "bob",
        4.25,
    )