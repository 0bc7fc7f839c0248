"""Infrastructure mixin shared by every resource facade"""

from typing import Iterable, Optional

from ..status import ResourceStatus, classify


class InfrastructureMixin:
    """
    Plumbing for facades built on a Session and a link to one entity.

    Facades never cache the entity: entity_xml fetches the current
    representation on every access because state changes server-side.
    """

    KIND = "Resource"

    def __init__(self, session, link):
        """
        Args:
            session: vcloud_sdk.Session
            link: href of the entity, or a Link/wrapper carrying one
        """
        self._session = session
        self._link = getattr(link, "href", link)

    @property
    def connection(self):
        return self._session.connection

    @property
    def href(self) -> str:
        return self._link

    @property
    def entity_xml(self):
        return self.connection.get(self._link)

    @property
    def name(self) -> Optional[str]:
        return self.entity_xml.name

    @property
    def status(self) -> ResourceStatus:
        return classify(self.entity_xml.status)

    def find_catalog_by_name(self, name: str):
        return self._session.find_catalog_by_name(name)

    def wait_for_running_tasks(self, entity, label: str) -> None:
        self._session.monitor.wait_for_running_tasks(
            entity, label, self._session.time_limits.limit_for("default"))

    def _perform(self, operation, submit, time_limit_key: Optional[str] = None,
                 preconditions: Iterable = (), on_success=None, guarded=None):
        """Run an operation through the session's GuardedActionExecutor.

        ``guarded`` is the facade whose status guards the operation; it
        defaults to this facade.
        """
        return self._session.executor.perform(
            guarded or self,
            operation,
            submit,
            time_limit_key=time_limit_key,
            preconditions=preconditions,
            on_success=on_success,
        )

    def __eq__(self, other):
        return type(self) is type(other) and self.href == other.href

    def __hash__(self):
        return hash((type(self), self.href))

    def __repr__(self):
        return f"<{type(self).__name__} {self.href}>"
