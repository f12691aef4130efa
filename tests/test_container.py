"""Tests for logfake.container and LogFake.bind()."""

import pytest

from logfake import Container, LogFake, Repository, get_container, set_container


class TestContainer:
    """Instance bindings."""

    def test_instance_and_make(self):
        container = Container()
        obj = object()
        container.instance('thing', obj)
        assert container.make('thing') is obj
        assert container.bound('thing')

    def test_make_unbound_raises(self):
        with pytest.raises(KeyError, match=r"Nothing is bound to \[log\]"):
            Container().make('log')

    def test_forget_instance(self):
        container = Container()
        container.instance('thing', 1)
        container.forget_instance('thing')
        container.forget_instance('thing')
        assert not container.bound('thing')

    def test_swap_restores_previous(self):
        container = Container()
        container.instance('log', 'real')
        restore = container.swap('log', 'fake')
        assert container.make('log') == 'fake'
        restore()
        assert container.make('log') == 'real'

    def test_swap_restores_absence(self):
        container = Container()
        restore = container.swap('log', 'fake')
        restore()
        assert not container.bound('log')


class TestSingleton:
    """Module-level container."""

    def test_get_container_is_stable(self):
        set_container(None)
        assert get_container() is get_container()

    def test_set_container_returns_previous(self):
        first = Container()
        set_container(first)
        assert set_container(Container()) is first


class TestBind:
    """LogFake.bind() replaces the bound logger."""

    def test_bind_replaces_log(self):
        container = Container()
        container.instance('log', 'production logger')
        fake, teardown = LogFake.bind(container)
        assert isinstance(fake, LogFake)
        assert container.make('log') is fake
        teardown()
        assert container.make('log') == 'production logger'

    def test_bind_uses_global_container(self):
        container = Container()
        set_container(container)
        fake, _ = LogFake.bind()
        assert get_container().make('log') is fake

    def test_bind_uses_container_config(self):
        container = Container()
        config = Repository({'logging': {'default': 'app'}})
        container.instance('config', config)
        fake, _ = LogFake.bind(container)
        assert fake.config is config
        fake.info('routed')
        fake.channel('app').assert_logged('info')

    def test_application_code_sees_fake(self):
        """Code resolving 'log' from the container writes into the fake."""
        container = Container()
        fake, teardown = LogFake.bind(container)

        def charge(amount):
            container.make('log').channel('payments').info('Charged', {'amount': amount})

        charge(10)
        fake.channel('payments').assert_logged(
            'info', lambda message, context: context['amount'] == 10)
        teardown()

    def test_bind_emits_diagnostic(self, diagnostics):
        LogFake.bind(Container())
        assert "[logfake:container] Bound [log]" in diagnostics.getvalue()
