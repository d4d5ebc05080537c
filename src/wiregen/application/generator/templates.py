"""Source templates of the generated registration module."""

from textwrap import dedent

MODULE_TEMPLATE = dedent(
    '''
    """Dependency registrations generated by wiregen {version}.

    Do not edit: regenerate with the ``wiregen`` command instead.
    Bindings: {binding_count}, shared singleton instances: {shared_count}.
    """

    {imports_block}


    {register_block}
    ''',
).strip()

FIXED_IMPORT = "from wiregen.container import AppContainer"

STAR_IMPORT_TEMPLATE = "from {module} import *  # noqa: F403"

REGISTER_FUNCTION_TEMPLATE = dedent(
    '''
    def register_dependencies(container: AppContainer | None = None) -> None:
        """Register every discovered binding (shared container if None)."""
        container = container if container is not None else AppContainer.shared()
    {body}
    ''',
).strip()

ASSERTIONS_TEMPLATE = dedent(
    '''
    if __debug__:

        def assert_all_injections(container: AppContainer | None = None) -> None:
            """Resolve every injected type. Use only in tests."""
            container = container if container is not None else AppContainer.shared()
    {body}
    ''',
).strip()

SHARED_COMMENT_TEMPLATE = "# Shared singleton instance of {implementation}"
SHARED_INSTANCE_TEMPLATE = "{name} = {implementation}()"
SHARED_REGISTRATION_TEMPLATE = "container.register_singleton({type}, lambda: {name})"
SINGLETON_REGISTRATION_TEMPLATE = "container.register_singleton({type}, {implementation})"
TRANSIENT_REGISTRATION_TEMPLATE = "container.register({type}, {implementation})"
RESOLVE_TEMPLATE = "container.resolve({type})"
