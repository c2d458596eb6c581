import pytest

import subdivide.errors
import subdivide.labels


def test_split_top_level ():

	"""Top-level labels and whole groups are separated, with their positions."""

	items = subdivide.labels.split_top_level("@a (x (y)) (z)")

	assert [item.kind for item in items] == ["label", "node", "node"]
	assert [item.text for item in items] == ["@a", "(x (y))", "(z)"]
	assert [item.start_index for item in items] == [0, 3, 11]


def test_label_directly_before_group ():

	"""A label needs no space before its group."""

	items = subdivide.labels.split_top_level("@a(x) (@a)")

	assert [item.text for item in items] == ["@a", "(x)", "(@a)"]


def test_expand_single_reference ():

	"""A reference is replaced by the group it names."""

	assert subdivide.labels.expand_labels("@beat (kick hat) (@beat snare)") == "((kick hat) snare)"


def test_expand_repeated_and_chained_references ():

	"""A group may reuse a label many times and use labels built from labels."""

	notation = "@a (x y) @b (@a z) (@b @a @a)"

	assert subdivide.labels.expand_labels(notation) == "(((x y) z) (x y) (x y))"


def test_notation_without_labels_passes_through ():

	"""A single group comes back as it is."""

	assert subdivide.labels.expand_labels("(a (b c))") == "(a (b c))"
	assert subdivide.labels.expand_labels("") == ""


def test_unlabelled_group_before_final_is_rejected ():

	"""Only the final group may go without a label."""

	with pytest.raises(subdivide.errors.UnbalancedGroups) as exc_info:
		subdivide.labels.expand_labels("(x) @a (y) (@a)")

	assert exc_info.value.index == 0


def test_unwrapped_body_after_definitions ():

	"""Without wrapping, everything after the definitions becomes the final group."""

	assert subdivide.labels.expand_labels("@p (x y) a @p", require_wrapping=False) == "(a (x y))"
	assert subdivide.labels.expand_labels("@p (x y) (z) @p b", require_wrapping=False) == "((z) (x y) b)"
	assert subdivide.labels.expand_labels("@p (x y)", require_wrapping=False) == "()"


def test_unwrapped_body_needs_defined_labels ():

	"""References in an unwrapped body still have to be defined first."""

	with pytest.raises(subdivide.errors.UndefinedLabel):
		subdivide.labels.expand_labels("(x) @a (y) (@a)", require_wrapping=False)


@pytest.mark.parametrize("notation, label, index", [
	("@A (x) (y)", "@A", 0),
	("abc (x)", "abc", 0),
	("@a (x) @b2 (y) (z)", "@b2", 7),
])
def test_malformed_label (notation: str, label: str, index: int):

	"""Labels are an at sign followed by lowercase letters."""

	with pytest.raises(subdivide.errors.MalformedLabel) as exc_info:
		subdivide.labels.expand_labels(notation)

	assert exc_info.value.label == label
	assert exc_info.value.index == index


def test_malformed_reference ():

	"""References inside groups follow the label grammar too."""

	with pytest.raises(subdivide.errors.MalformedLabel) as exc_info:
		subdivide.labels.expand_labels("@a (x) (@a @Zz)")

	assert exc_info.value.label == "@Zz"


@pytest.mark.parametrize("notation, label, index", [
	("@a @b (x)", "@a", 0),
	("(x) @a", "@a", 4),
])
def test_dangling_label (notation: str, label: str, index: int):

	"""A label must be directly followed by a group."""

	with pytest.raises(subdivide.errors.DanglingLabel) as exc_info:
		subdivide.labels.expand_labels(notation)

	assert exc_info.value.label == label
	assert exc_info.value.index == index
	assert "must be followed by a node" in str(exc_info.value)


def test_duplicate_label ():

	"""A label may be defined only once."""

	with pytest.raises(subdivide.errors.DuplicateLabel, match="defined multiple times"):
		subdivide.labels.expand_labels("@a (x) @a (y) (@a)")


def test_undefined_label ():

	"""A reference must name a label defined earlier."""

	with pytest.raises(subdivide.errors.UndefinedLabel, match="'@b' is not defined"):
		subdivide.labels.expand_labels("@a (x) (@b)")


def test_label_cannot_refer_to_itself ():

	"""A group's own label is not yet defined inside it."""

	with pytest.raises(subdivide.errors.UndefinedLabel):
		subdivide.labels.expand_labels("@a (x @a) (@a)")


def test_unbalanced_labelled_notation ():

	"""Delimiters are checked before labels are looked at."""

	with pytest.raises(subdivide.errors.UnbalancedGroups):
		subdivide.labels.expand_labels("@a (x (y) (@a)")
