"""
Tests for the Chat Client UI

Tests for the Textual-based user interface components. The running-app
tests drive a real ChatApp through Textual's test pilot against a fake
chat server.
"""

import asyncio

import pytest
from textual.widgets import Input, TextArea

from docchat import ClientConfig, LineTransport, ViewState
from docchat.ui.adapter import UIAdapter
from docchat.ui.app import (
    ChatApp,
    CreateRoomDialog,
    LoginScreen,
    RoomListScreen,
    RoomScreen,
)

from conftest import TIMEOUT, wait_until


async def unused_port() -> int:
    """Return a local port with nothing listening on it."""
    listener = await asyncio.start_server(
        lambda reader, writer: None, "127.0.0.1", 0
    )
    port = listener.sockets[0].getsockname()[1]
    listener.close()
    await listener.wait_closed()
    return port


async def login(app, pilot, server, username="alice"):
    """Type a username on the login screen and submit it."""
    await asyncio.wait_for(server.connected.wait(), timeout=TIMEOUT)
    await wait_until(lambda: app._receive_task is not None)
    username_input = app.query_one("#username-input", Input)
    username_input.value = username
    username_input.focus()
    await pilot.pause()
    await pilot.press("enter")
    await server.expect(f"login {username}", "list_rooms")


def room_button_names(app):
    return [button.name for button in app.query(".room-button")]


class TestUIComponentsCanBeImported:
    """Tests to verify UI components can be imported and created."""

    def test_chat_app_can_be_imported(self):
        """Test that ChatApp can be imported."""
        assert ChatApp is not None

    def test_login_screen_can_be_imported(self):
        """Test that LoginScreen can be imported."""
        assert LoginScreen is not None

    def test_room_list_screen_can_be_imported(self):
        """Test that RoomListScreen can be imported."""
        assert RoomListScreen is not None

    def test_room_screen_can_be_imported(self):
        """Test that RoomScreen can be imported."""
        assert RoomScreen is not None

    def test_create_room_dialog_can_be_imported(self):
        """Test that CreateRoomDialog can be imported."""
        assert CreateRoomDialog is not None


class TestChatAppInitialization:
    """Tests for ChatApp initialization."""

    def test_chat_app_can_be_instantiated(self):
        """Test that ChatApp can be instantiated."""
        app = ChatApp()
        assert app is not None

    def test_chat_app_initial_state(self):
        """Test ChatApp initial state."""
        app = ChatApp()
        assert app.controller.view == ViewState.LOGIN_VIEW
        assert app.controller.session.username is None
        assert app.controller.session.current_room is None
        assert app.controller.is_document_editable is False
        assert app._current_screen == "login"
        assert app._receive_task is None

    def test_chat_app_uses_configured_endpoint(self):
        """Test that the transport targets the configured server."""
        app = ChatApp(ClientConfig(host="10.1.2.3", port=9000))
        assert app.transport.host == "10.1.2.3"
        assert app.transport.port == 9000
        assert not app.transport.is_connected

    def test_chat_app_accepts_transport(self):
        """Test that a transport can be injected."""
        transport = LineTransport("localhost", 1234)
        app = ChatApp(transport=transport)
        assert app.transport is transport
        assert app.controller.transport is transport

    def test_dispatcher_shares_controller_session(self):
        """Test that server events mutate the controller's session."""
        app = ChatApp()
        assert app.dispatcher.session is app.controller.session
        assert app.dispatcher.ui is app

    def test_chat_app_is_ui_adapter(self):
        """Test that ChatApp implements the UI adapter."""
        app = ChatApp()
        assert isinstance(app, UIAdapter)
        assert app.controller.ui is app

    def test_chat_app_has_bindings(self):
        """Test that ChatApp has keybindings defined."""
        app = ChatApp()
        assert hasattr(app, "BINDINGS")
        assert len(app.BINDINGS) > 0

    def test_chat_app_has_css(self):
        """Test that ChatApp has CSS defined."""
        app = ChatApp()
        assert hasattr(app, "CSS")
        assert len(app.CSS) > 0


class TestUIPackageExports:
    """Tests for UI package exports."""

    def test_ui_package_exports_chat_app(self):
        """Test that UI package exports ChatApp."""
        from docchat.ui import ChatApp as ImportedChatApp

        assert ImportedChatApp is ChatApp

    def test_ui_package_exports_adapter(self):
        """Test that UI package exports UIAdapter."""
        from docchat.ui import UIAdapter as ImportedAdapter

        assert ImportedAdapter is UIAdapter


class TestChatAppRunning:
    """Tests for the adapter behaviour of a running ChatApp."""

    @pytest.mark.asyncio
    async def test_connect_failure_exits_with_status_one(self):
        """Test that an unreachable server ends the app with status 1."""
        port = await unused_port()
        app = ChatApp(ClientConfig(host="127.0.0.1", port=port))

        async with app.run_test():
            pass

        assert app.return_code == 1

    @pytest.mark.asyncio
    async def test_room_list_renders_one_button_per_room(self, server):
        """Test that a room list event renders one button per room."""
        app = ChatApp(ClientConfig(host="127.0.0.1", port=server.port))

        async with app.run_test() as pilot:
            await login(app, pilot, server)
            assert app._current_screen == "room-list"

            await server.push("list_rooms general random")
            await wait_until(lambda: len(app.query(".room-button")) == 2)

            assert room_button_names(app) == ["general", "random"]

    @pytest.mark.asyncio
    async def test_attendances_toggle_document_read_only(self, server):
        """Test that the editor holder alone may edit the document."""
        app = ChatApp(ClientConfig(host="127.0.0.1", port=server.port))

        async with app.run_test() as pilot:
            await login(app, pilot, server)
            await app.controller.join("general")
            await server.expect(
                "join general alice", "editor general", "fetch_file general"
            )
            area = app.query_one("#document-area", TextArea)
            assert app._current_screen == "room"
            assert area.read_only is True

            await server.push("attendances alice bob")
            await wait_until(lambda: area.read_only is False)
            assert app.controller.is_document_editable is True

            await server.push("message hello;;;world")
            await wait_until(lambda: app.get_document() == "hello\nworld")

            await app.controller.send()
            await server.expect("message general alice hello;;;world")

            await server.push("attendances bob alice")
            await wait_until(lambda: area.read_only is True)
            assert app.controller.is_document_editable is False

    @pytest.mark.asyncio
    async def test_room_names_with_brackets_render_as_text(self, server):
        """Test that bracketed room and user names are shown verbatim."""
        app = ChatApp(ClientConfig(host="127.0.0.1", port=server.port))

        async with app.run_test() as pilot:
            await login(app, pilot, server)

            await server.push("list_rooms general [/] [x [bold]")
            await wait_until(lambda: len(app.query(".room-button")) == 4)
            assert room_button_names(app) == [
                "general",
                "[/]",
                "[x",
                "[bold]",
            ]

            await app.controller.join("[/]")
            await server.expect(
                "join [/] alice", "editor [/]", "fetch_file [/]"
            )
            await server.push("attendances [/] alice")
            await wait_until(
                lambda: app.controller.session.participants == ["[/]", "alice"]
            )
            await app.controller.show_participants()
            await server.expect("attendances [/]")
            await pilot.pause()

            assert app.is_running

    @pytest.mark.asyncio
    async def test_username_with_brackets_renders_as_text(self, server):
        """Test that a bracketed username does not break the room list."""
        app = ChatApp(ClientConfig(host="127.0.0.1", port=server.port))

        async with app.run_test() as pilot:
            await login(app, pilot, server, username="[/]")
            await pilot.pause()

            assert app.controller.session.username == "[/]"
            assert app._current_screen == "room-list"
            assert app.is_running
