from tlb import TLB, TLB_SIZE


def test_empty_lookup_misses():
    tlb = TLB()
    assert tlb.lookup(0) is None
    assert len(tlb) == 0


def test_insert_then_lookup():
    tlb = TLB()
    tlb.insert(7, 3)
    assert tlb.lookup(7) == 3
    assert tlb.lookup(8) is None


def test_oldest_entry_overwritten_when_full():
    tlb = TLB()
    for page in range(TLB_SIZE + 1):
        tlb.insert(page, page + 100)

    assert len(tlb) == TLB_SIZE
    assert tlb.lookup(0) is None
    assert tlb.lookup(1) == 101
    assert tlb.lookup(TLB_SIZE) == TLB_SIZE + 100
    # slot 0 was reused for the newest entry
    assert tlb.entries[0].logical_page == TLB_SIZE


def test_first_match_wins_for_duplicates():
    tlb = TLB()
    tlb.insert(5, 1)
    tlb.insert(5, 2)
    assert tlb.lookup(5) == 1


def test_duplicate_ages_out_to_newer_copy():
    tlb = TLB(size=4)
    tlb.insert(5, 1)
    tlb.insert(5, 2)
    tlb.insert(6, 0)
    tlb.insert(7, 0)
    tlb.insert(8, 0)  # overwrites (5, 1)
    assert tlb.lookup(5) == 2


def test_initial_zero_slots_are_not_consulted():
    tlb = TLB()
    tlb.insert(3, 9)
    # unused slots hold page 0 but sit outside the valid window
    assert tlb.lookup(0) is None
