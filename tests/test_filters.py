from starknet_indexer.storage.filters import (
    BytesFilter,
    EnumFilter,
    FilterOptions,
    IntegerFilter,
    SortOrder,
    TimeFilter,
    with_asc_sort_by_id_filter,
    with_cursor,
    with_desc_sort_by_id_filter,
    with_limit_filter,
    with_max_height,
    with_multi_sort,
    with_offset_filter,
    with_sort_filter,
)


def test_build_without_options_gives_defaults():
    assert FilterOptions.build() == FilterOptions()
    opts = FilterOptions.build()
    assert opts.limit == 0 and opts.offset == 0 and opts.sort_order is None


def test_limit_applied_when_positive():
    assert FilterOptions.build(with_limit_filter(25)).limit == 25


def test_limit_ignored_when_not_positive():
    assert FilterOptions.build(with_limit_filter(0)).limit == 0
    assert FilterOptions.build(with_limit_filter(7), with_limit_filter(-1)).limit == 7


def test_offset_applied_when_positive():
    assert FilterOptions.build(with_offset_filter(40)).offset == 40
    assert FilterOptions.build(with_offset_filter(-3)).offset == 0


def test_sort_filter():
    opts = FilterOptions.build(with_sort_filter("height", SortOrder.DESC))
    assert opts.sort_field == "height"
    assert opts.sort_order is SortOrder.DESC


def test_sort_by_id_helpers():
    asc = FilterOptions.build(with_asc_sort_by_id_filter())
    desc = FilterOptions.build(with_desc_sort_by_id_filter())
    assert (asc.sort_field, asc.sort_order) == ("id", SortOrder.ASC)
    assert (desc.sort_field, desc.sort_order) == ("id", SortOrder.DESC)


def test_later_option_overrides_earlier():
    opts = FilterOptions.build(with_asc_sort_by_id_filter(), with_desc_sort_by_id_filter())
    assert opts.sort_order is SortOrder.DESC


def test_multi_sort():
    opts = FilterOptions.build(with_multi_sort("height", "id"))
    assert opts.sort_fields == ["height", "id"]


def test_max_height_and_cursor():
    opts = FilterOptions.build(with_max_height(1000, "height"), with_cursor(55))
    assert opts.max_height == 1000
    assert opts.height_column_name == "height"
    assert opts.cursor == 55


def test_filters_do_not_share_lists():
    first, second = EnumFilter(), EnumFilter()
    first.in_.append(1)
    assert second.in_ == []
    bytes_filter = BytesFilter()
    assert bytes_filter.in_ == [] and bytes_filter.eq == b""


def test_range_filters_default_without_between():
    assert IntegerFilter().between is None
    assert TimeFilter().between is None
    assert IntegerFilter(gt=3).gt == 3