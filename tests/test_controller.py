"""Scenario tests for the controller."""

import pytest

from touchee.config import ToucheeConfig
from touchee.data import Session, User
from touchee.protocols import Action, ActionHandler, Severity
from touchee.views import (
    CLEAR, CLOSE, COMMIT, DELETE, LOG_IN, NEW_ITEM, RESTORE,
    EditView, ListView, ToucheeController,
)


def logged_in_controller():
    controller = ToucheeController(session=Session(user=User(username="test")))
    controller.navigate_to_start()
    return controller


def button(view, caption):
    return next(b for b in view.buttons if b.text() == caption)


def test_start_screen_depends_on_session(qapp):
    controller = ToucheeController()
    controller.navigate_to_start()
    assert isinstance(controller.manager.current_view(), EditView)
    assert controller.get_actions(None, None) == (LOG_IN, CLEAR)

    assert isinstance(logged_in_controller().manager.current_view(), ListView)


def test_sample_users(qapp):
    controller = ToucheeController()
    assert [u.username for u in controller.container.beans()] == ["foo", "miki", "vaadin"]


def test_login_with_test_credentials(qapp, notifier):
    controller = ToucheeController()
    controller.navigate_to_start()
    login = controller.manager.current_view()

    login.widget("username").set_value("test")
    login.widget("password").set_value("test")
    button(login, "Log in").click()

    assert isinstance(controller.manager.current_view(), ListView)
    assert controller.session.user.username == "test"
    assert notifier.shown == []
    # Clear runs after Log in
    assert login.field_values() == {"username": None, "password": None}


@pytest.mark.parametrize("username,password", [
    ("test", "wrong"), ("admin", "test"), (None, None), (" test ", "  test  "), ("test", " test"),
])
def test_login_with_other_credentials(qapp, notifier, username, password):
    controller = ToucheeController()
    controller.navigate_to_start()
    login = controller.manager.current_view()

    login.widget("username").set_value(username)
    login.widget("password").set_value(password)
    button(login, "Log in").click()

    assert controller.manager.current_view() is login
    assert controller.session.user is None
    assert notifier.shown == [("Invalid credentials", "Please log in as test/test", Severity.WARNING)]


def test_configured_credentials(qapp, notifier):
    config = ToucheeConfig(login_username="admin", login_password="secret")
    controller = ToucheeController(config=config)

    controller.handle_action(LOG_IN, None, {"username": "admin", "password": "secret"})

    assert isinstance(controller.manager.current_view(), ListView)
    assert notifier.shown == []


def test_new_item_adds_record_and_opens_editor(qapp, notifier):
    controller = logged_in_controller()
    list_view = controller.manager.current_view()

    button(list_view, "New").click()

    assert controller.container.size() == 4
    edit_view = controller.manager.current_view()
    assert isinstance(edit_view, EditView)
    assert edit_view.get_item_data_source() is controller.container.get_item(3)
    assert edit_view.get_actions(None, None) == (COMMIT, CLOSE, RESTORE)
    assert notifier.shown == []


def test_save_commits_and_returns_to_list(qapp, notifier):
    controller = logged_in_controller()
    list_view = controller.manager.current_view()
    list_view.choose_item(1)
    edit_view = controller.manager.current_view()

    edit_view.widget("email").set_value("miki@example.org")
    button(edit_view, "Save").click()

    assert controller.manager.current_view() is list_view
    assert controller.container.get_item(1).bean.email == "miki@example.org"
    assert list_view.list_widget.item(1).text() == "miki <miki@example.org>"
    assert notifier.shown == []


def test_save_with_missing_username_stays_on_editor(qapp, notifier):
    controller = logged_in_controller()
    button(controller.manager.current_view(), "New").click()
    edit_view = controller.manager.current_view()

    button(edit_view, "Save").click()

    assert controller.manager.current_view() is edit_view
    assert notifier.shown == [("Error", "Required: Username", Severity.ERROR)]


def test_undo_discards_and_returns_to_list(qapp):
    controller = logged_in_controller()
    list_view = controller.manager.current_view()
    list_view.choose_item(0)
    edit_view = controller.manager.current_view()

    edit_view.widget("username").set_value("bar")
    button(edit_view, "Undo").click()

    assert controller.manager.current_view() is list_view
    assert controller.container.get_item(0).bean.username == "foo"


def test_delete_marked(qapp, notifier):
    controller = logged_in_controller()
    list_view = controller.manager.current_view()
    list_view.set_marked(0)
    list_view.set_marked(2)

    button(list_view, "Delete marked").click()

    assert controller.container.item_ids() == [1]
    assert list_view.item_ids() == [1]
    assert controller.manager.current_view() is list_view
    assert notifier.shown == []


def test_choose_unknown_item(qapp, notifier):
    controller = logged_in_controller()
    list_view = controller.manager.current_view()

    result = list_view.choose_item(99)

    assert not result.ok
    assert controller.manager.current_view() is list_view
    assert notifier.severities() == [Severity.ERROR]


def test_edit_actions_need_an_edit_view(qapp, notifier):
    controller = logged_in_controller()
    list_view = controller.manager.current_view()

    result = controller.process_action(COMMIT, list_view, None)

    assert not result.ok
    assert "edit form" in result.message


def test_unregistered_action_policy(qapp, notifier):
    controller = logged_in_controller()
    unknown = Action("Export")
    before = controller.container.item_ids()

    controller.handle_action(unknown, None, None)
    assert notifier.shown == []
    assert controller.container.item_ids() == before

    controller.ignoring_unregistered_actions = False
    controller.handle_action(unknown, None, None)
    assert len(notifier.shown) == 1
    title, message, severity = notifier.shown[0]
    assert title == "Cannot perform action"
    assert "(Export)" in message
    assert severity is Severity.ERROR


def test_configure_sets_policy(qapp, notifier):
    controller = ToucheeController()
    assert controller.ignoring_unregistered_actions is True

    controller.configure(ToucheeConfig(ignoring_unregistered_actions=False))
    controller.handle_action(Action("Export"), None, None)

    assert controller.ignoring_unregistered_actions is False
    assert notifier.severities() == [Severity.ERROR]


def test_handler_registration_takes_effect_on_next_dispatch(qapp, notifier):
    class Counting(ActionHandler):
        def __init__(self):
            self.count = 0

        def handle_action(self, action, sender, target):
            self.count += 1

    controller = logged_in_controller()
    list_view = controller.manager.current_view()
    counting = Counting()

    controller.set_action_handler(NEW_ITEM, counting)
    button(list_view, "New").click()
    assert counting.count == 1
    assert controller.container.size() == 3

    controller.remove_action_handler(NEW_ITEM)
    button(list_view, "New").click()
    assert counting.count == 1
    assert controller.container.size() == 3
    assert controller.get_action_handler(NEW_ITEM) is None
    assert notifier.shown == []


def test_get_actions_follows_current_view(qapp):
    controller = ToucheeController()
    assert controller.get_actions(None, None) == ()

    controller.navigate_to_start()
    controller.handle_action(LOG_IN, None, {"username": "test", "password": "test"})
    assert controller.get_actions(None, None) == (NEW_ITEM, DELETE)


def test_leave_goes_back(qapp):
    controller = logged_in_controller()
    list_view = controller.manager.current_view()
    list_view.choose_item(2)

    controller.handle_action(CLOSE, controller.manager.current_view(), None)

    assert controller.manager.current_view() is list_view


def test_main_window(qapp):
    from touchee.app import create_main_window
    from touchee.protocols import get_notifier, register_notifier
    from touchee.views import ToastNotifier

    try:
        window = create_main_window()
        assert window.centralWidget() is window.controller.manager
        assert isinstance(window.controller.manager.current_view(), EditView)
        assert isinstance(get_notifier(), ToastNotifier)
    finally:
        register_notifier(None)
