"""Map menu input to template groups and groups to the paths they install."""


def _append_unique(items, value):
    if value not in items:
        items.append(value)


def resolve_selection(raw_input, groups):
    """Translate a raw menu answer into the ids of the selected groups.

    Empty or whitespace-only input selects every group. Otherwise the input
    is a comma-separated list of 1-based indexes into ``groups``; the index
    one past the last group means "all" and wins over any other token.
    Non-numeric and out-of-range tokens are ignored, duplicates collapse.

    Args:
        raw_input: The line the user typed.
        groups: Ordered sequence of TemplateGroup.

    Returns:
        List of group ids in first-seen order. An empty list means the user
        selected nothing usable and the install should be cancelled.
    """
    all_ids = [group.id for group in groups]
    if not raw_input.strip():
        return all_ids

    all_index = len(groups) + 1
    selected = []
    for token in raw_input.split(","):
        token = token.strip()
        if not token.isdecimal():
            continue
        index = int(token)
        if index == all_index:
            return all_ids
        if 1 <= index <= len(groups):
            _append_unique(selected, groups[index - 1].id)
    return selected


def select_by_ids(ids, groups):
    """Return the known ids among ``ids``, in catalog order."""
    wanted = set(ids)
    return [group.id for group in groups if group.id in wanted]


def expand_selection(selected_ids, groups, common_paths):
    """Return the root-relative paths to install for the selected groups.

    Group paths come first in catalog order, then the common paths, which
    are included regardless of the selection.
    """
    wanted = set(selected_ids)
    paths = []
    for group in groups:
        if group.id in wanted:
            for path in group.paths:
                _append_unique(paths, path)
    for path in common_paths:
        _append_unique(paths, path)
    return paths
