import copy

from gamenight_nav.defaults import default_nav_config
from gamenight_nav.mutations import (
    CONFIRM_DELETE_GROUP,
    CONFIRM_DELETE_MENU,
    add_group,
    add_item,
    add_mega_menu,
    add_primary_link,
    delete_node,
    update_fields,
)
from gamenight_nav.selection import Selection, form_values


def _orders(nodes):
    return [node.sort_order for node in nodes]


def _menu_with_item(config):
    config, menu_id = add_mega_menu(config)
    config, group_id = add_group(config, menu_id)
    config, item_id = add_item(config, menu_id, group_id)
    return config, menu_id, group_id, item_id


def test_adds_append_with_dense_sort_order(empty_config):
    config = empty_config
    ids = []
    for _ in range(3):
        config, link_id = add_primary_link(config)
        ids.append(link_id)
    assert [link.id for link in config.primary_links] == ids
    assert _orders(config.primary_links) == [1, 2, 3]
    assert all(link.is_visible for link in config.primary_links)
    assert empty_config.primary_links == []


def test_new_nodes_use_placeholders(empty_config):
    config, menu_id, group_id, item_id = _menu_with_item(empty_config)
    menu = config.find_menu(menu_id)
    assert menu.label == 'New menu'
    assert menu.groups[0].title == 'New group'
    item = menu.groups[0].items[0]
    assert (item.icon, item.tone, item.href) == ('guide', 'sage', '/admin/new-item')


def test_add_group_to_missing_menu_is_noop(empty_config):
    config, _ = add_mega_menu(empty_config)
    result, group_id = add_group(config, 'missing')
    assert group_id is None
    assert result == config


def test_add_item_to_missing_group_is_noop(empty_config):
    config, menu_id = add_mega_menu(empty_config)
    result, item_id = add_item(config, menu_id, 'missing')
    assert item_id is None
    assert result == config


def test_update_fields_merges_only_given_fields():
    config = default_nav_config()
    link = config.primary_links[0]
    selection = Selection.primary(link.id)
    updated = update_fields(config, selection, {'label': 'Random game', 'isVisible': False})
    new_link = updated.primary_links[0]
    assert new_link.label == 'Random game'
    assert new_link.is_visible is False
    assert new_link.href == link.href
    assert config.primary_links[0].label == 'Pick a game'


def test_update_fields_ignores_fields_of_other_kinds():
    config = default_nav_config()
    group = config.mega_menus[0].groups[0]
    selection = Selection.group('play', group.id)
    updated = update_fields(config, selection, {'title': 'Tonight', 'href': '/nope', 'tone': 'mint'})
    assert form_values(updated, selection) == {'title': 'Tonight', 'isVisible': True}


def test_update_item_fields():
    config = default_nav_config()
    group = config.mega_menus[0].groups[0]
    item = group.items[1]
    selection = Selection.item('play', group.id, item.id)
    updated = update_fields(config, selection, {'description': 'No table flips.', 'tone': 'moss'})
    values = form_values(updated, selection)
    assert values['description'] == 'No table flips.'
    assert values['tone'] == 'moss'
    assert values['title'] == 'House rules'


def test_update_with_stale_selection_is_noop():
    config = default_nav_config()
    assert update_fields(config, Selection.item('play', 'gone', 'gone'), {'title': 'x'}) == config
    assert update_fields(config, None, {'title': 'x'}) == config


def test_delete_primary_link_renormalizes():
    config = default_nav_config()
    first = config.primary_links[0]
    result, removed = delete_node(config, Selection.primary(first.id))
    assert removed
    assert [link.label for link in result.primary_links] == ['History']
    assert _orders(result.primary_links) == [1]
    assert len(config.primary_links) == 2


def test_delete_menu_with_groups_declined(empty_config):
    config, menu_id, group_id, item_id = _menu_with_item(empty_config)
    prompts = []

    def decline(message):
        prompts.append(message)
        return False

    result, removed = delete_node(config, Selection.menu(menu_id), decline)
    assert not removed
    assert prompts == [CONFIRM_DELETE_MENU]
    assert result == config
    assert result.find_group(menu_id, group_id).items[0].id == item_id


def test_delete_menu_with_groups_accepted(empty_config):
    config, other_id = add_mega_menu(empty_config)
    config, menu_id, _, _ = _menu_with_item(config)
    config, last_id = add_mega_menu(config)
    result, removed = delete_node(config, Selection.menu(menu_id), lambda message: True)
    assert removed
    assert [m.id for m in result.mega_menus] == [other_id, last_id]
    assert _orders(result.mega_menus) == [1, 2]


def test_delete_menu_with_groups_requires_confirm(empty_config):
    config, menu_id, _, _ = _menu_with_item(empty_config)
    result, removed = delete_node(config, Selection.menu(menu_id))
    assert not removed
    assert result == config


def test_delete_empty_menu_skips_confirmation(empty_config):
    config, menu_id = add_mega_menu(empty_config)

    def fail(message):
        raise AssertionError('should not prompt')

    result, removed = delete_node(config, Selection.menu(menu_id), fail)
    assert removed
    assert result.mega_menus == []


def test_delete_group_with_items_asks(empty_config):
    config, menu_id, group_id, _ = _menu_with_item(empty_config)
    prompts = []
    result, removed = delete_node(
        config, Selection.group(menu_id, group_id), lambda message: prompts.append(message) or True
    )
    assert removed
    assert prompts == [CONFIRM_DELETE_GROUP]
    assert result.find_menu(menu_id).groups == []


def test_delete_item_and_missing_targets():
    config = default_nav_config()
    group = config.mega_menus[1].groups[0]
    result, removed = delete_node(config, Selection.item('admin', group.id, group.items[0].id))
    assert removed
    assert [i.title for i in result.find_group('admin', group.id).items] == ['Tags', 'Navigation']
    assert _orders(result.find_group('admin', group.id).items) == [1, 2]

    assert delete_node(config, Selection.item('admin', 'nope', 'nope')) == (config, False)
    assert delete_node(config, None) == (config, False)


def test_mutations_do_not_alias_input():
    config = default_nav_config()
    before = copy.deepcopy(config)
    result, _ = add_item(config, 'play', config.mega_menus[0].groups[0].id)
    result.mega_menus[0].groups[0].items[0].title = 'mutated'
    assert config == before
