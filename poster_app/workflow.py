import logging
from typing import Callable, Optional

from .capabilities import FileSaver, ShareTarget
from .errors import InputError, RequestError
from .generator import (
    build_share_payload,
    default_client_factory,
    poster_caption,
    poster_filename,
)
from .poster_graph import POSTER_GRAPH
from .schemas import Notification, PosterStatus, WorkflowState

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "style", "model")

SUCCESS_NOTIFICATION = Notification(
    kind="success",
    title="✅ Success",
    description="Poster generated successfully!",
)


class PosterWorkflow:
    """
    Holds the form state of the poster generator and runs one image request
    per submission.

    The image client is built from the current credential by ``client_factory``
    so tests can hand in a fake. ``saver`` and ``share_target`` are the
    platform capabilities behind ``download()`` and ``share()``; a missing
    share target means sharing is not offered.
    """

    def __init__(
        self,
        api_key: str = "",
        model: str = "dall-e-3",
        client_factory: Callable = default_client_factory,
        saver: Optional[FileSaver] = None,
        share_target: Optional[ShareTarget] = None,
        graph=POSTER_GRAPH,
    ):
        self.title = ""
        self.style = ""
        self.model = model
        self._api_key = api_key or ""

        self.client_factory = client_factory
        self.saver = saver
        self.share_target = share_target
        self.graph = graph

        self.state = WorkflowState.IDLE
        self.image_url: Optional[str] = None
        self.notification: Optional[Notification] = None

    @property
    def busy(self) -> bool:
        return self.state == WorkflowState.BUSY

    @property
    def has_credential(self) -> bool:
        return bool(self._api_key)

    @property
    def can_share(self) -> bool:
        return self.share_target is not None and self.share_target.is_available()

    def update_field(self, field: str, value: str) -> None:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown field: {field}")
        setattr(self, field, value)

    def set_credential(self, value: str) -> None:
        self._api_key = value

    def _block(self, message: str, **kwargs) -> InputError:
        err = InputError(message, **kwargs)
        self.notification = err.notification
        return err

    def _fail(self, err: RequestError) -> None:
        logger.exception("Poster generation failed for %r with %s", self.title, self.model)
        self.state = WorkflowState.FAILED
        self.notification = err.notification

    async def submit(self) -> str:
        """
        Generate a poster for the current title, style and model.

        Returns the image URL. Raises InputError when the form is incomplete
        (nothing is sent) and RequestError when the image request fails.
        """
        if not self._api_key:
            raise self._block("missing credential")
        if not self.title.strip():
            raise self._block("missing title", description="Please enter a movie title")
        if not self.style:
            raise self._block("missing style", description="Please select an art style")

        self.state = WorkflowState.BUSY
        self.image_url = None
        self.notification = None

        try:
            client = self.client_factory(self._api_key)
            try:
                final_state = await self.graph.ainvoke({
                    "client": client,
                    "title": self.title,
                    "style": self.style,
                    "model": self.model,
                })
            finally:
                await client.close()
        except RequestError as err:
            self._fail(err)
            raise
        except Exception as exc:
            err = RequestError(f"Unexpected error while generating poster: {exc}")
            self._fail(err)
            raise err from exc

        self.image_url = final_state["image_url"]
        self.state = WorkflowState.SUCCEEDED
        self.notification = SUCCESS_NOTIFICATION
        return self.image_url

    def download(self) -> Optional[tuple[str, str]]:
        """Save the current poster; returns (path, filename) or None when there is nothing to save."""
        if not self.image_url or self.saver is None:
            return None
        filename = poster_filename(self.title)
        path = self.saver.save(self.image_url, filename)
        return path, filename

    def share(self) -> bool:
        if not self.image_url or not self.can_share:
            return False
        payload = build_share_payload(self.title, self.style, self.image_url)
        try:
            self.share_target.share(payload)
        except Exception:
            logger.exception("Error sharing poster")
            return False
        return True

    def status(self) -> PosterStatus:
        status = PosterStatus(
            state=self.state,
            busy=self.busy,
            title=self.title,
            style=self.style,
            model=self.model,
            has_credential=self.has_credential,
            image_url=self.image_url,
            notification=self.notification,
            can_share=self.can_share,
        )
        if self.image_url:
            status.caption = poster_caption(self.title, self.style)
        return status
