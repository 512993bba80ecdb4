import copy

import pytest

from gamenight_nav import models
from gamenight_nav.defaults import _DEFAULT_NAV, default_nav_config
from gamenight_nav.mutations import add_group, add_item, add_mega_menu, add_primary_link
from gamenight_nav.schema import NavValidationError, safe_validate, validate_nav_config


def _raw():
    return copy.deepcopy(_DEFAULT_NAV)


def test_default_config_is_valid_and_fresh():
    first = default_nav_config()
    second = default_nav_config()
    assert first == second
    first.primary_links[0].label = 'changed'
    assert default_nav_config().primary_links[0].label != 'changed'


def test_round_trip_of_built_tree(empty_config):
    config, _ = add_primary_link(empty_config)
    config, menu_id = add_mega_menu(config)
    config, group_id = add_group(config, menu_id)
    config, _ = add_item(config, menu_id, group_id)
    assert validate_nav_config(config.to_dict()) == config


def test_round_trip_of_default():
    config = default_nav_config()
    assert validate_nav_config(config.to_dict()) == config
    assert config.to_dict() == _DEFAULT_NAV


def test_unknown_keys_are_dropped():
    raw = _raw()
    raw['primaryLinks'][0]['color'] = 'red'
    raw['theme'] = 'dark'
    config = validate_nav_config(raw)
    assert 'color' not in config.to_dict()['primaryLinks'][0]
    assert 'theme' not in config.to_dict()


@pytest.mark.parametrize('mutate, fragment', [
    (lambda raw: raw['megaMenus'][0]['groups'][0]['items'][0].update(icon='rocket'), 'items[0].icon'),
    (lambda raw: raw['megaMenus'][0]['groups'][0]['items'][0].update(tone='neon'), 'items[0].tone'),
    (lambda raw: raw['primaryLinks'][0].update(id='not-a-uuid'), 'primaryLinks[0].id'),
    (lambda raw: raw['primaryLinks'][0].update(sortOrder=True), 'primaryLinks[0].sortOrder'),
    (lambda raw: raw['primaryLinks'][0].update(isVisible='yes'), 'primaryLinks[0].isVisible'),
    (lambda raw: raw['megaMenus'][0].update(label=''), 'megaMenus[0].label'),
    (lambda raw: raw['megaMenus'][0].update(id=''), 'megaMenus[0].id'),
    (lambda raw: raw['megaMenus'][0]['groups'][0].pop('items'), 'groups[0].items'),
    (lambda raw: raw.pop('megaMenus'), 'megaMenus'),
])
def test_invalid_documents_are_rejected(mutate, fragment):
    raw = _raw()
    mutate(raw)
    with pytest.raises(NavValidationError) as excinfo:
        validate_nav_config(raw)
    assert any(fragment in issue for issue in excinfo.value.issues)


def test_menu_id_need_not_be_uuid():
    config = validate_nav_config(_raw())
    assert [m.id for m in config.mega_menus] == ['play', 'admin']


def test_all_issues_are_collected():
    raw = _raw()
    raw['primaryLinks'][0]['href'] = ''
    raw['megaMenus'][1]['groups'][0]['items'][2]['tone'] = 'plaid'
    with pytest.raises(NavValidationError) as excinfo:
        validate_nav_config(raw)
    assert len(excinfo.value.issues) == 2
    assert '+1 more' in str(excinfo.value)


def test_non_object_root():
    config, error = safe_validate(['not', 'a', 'config'])
    assert config is None
    assert error.issues == ['config: must be an object']
    config, error = safe_validate(None)
    assert config is None and error is not None


def test_new_id_falls_back_without_entropy(monkeypatch):
    def no_entropy():
        raise NotImplementedError

    monkeypatch.setattr(models, 'uuid4', no_entropy)
    generated = models.new_id()
    assert generated.startswith('id-')
    assert generated != models.new_id()
