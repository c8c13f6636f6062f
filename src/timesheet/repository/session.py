# SPDX-License-Identifier: MIT

from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timesheet import configuration
from timesheet.model.user import Session


class SessionRepository:
    def __init__(self) -> None:
        self._session: Optional[Session] = None
        self.is_dirty = False

    @property
    def session(self) -> Session:
        if self._session is None:
            self.__load_data()
        if self._session is None:
            raise ValueError()
        return self._session

    def __load_data(self) -> None:
        self._session = {"user_id": None}
        if configuration.DATA_SESSION_PATH.is_file():
            loaded = load(configuration.DATA_SESSION_PATH.read_text(), Loader=Loader)
            if loaded is not None:
                self._session["user_id"] = loaded.get("user_id")

    def __save_data(self) -> None:
        configuration.DATA_SESSION_PATH.write_text(
            dump(dict(self.session), Dumper=Dumper)
        )

    def flush(self) -> None:
        if self._session is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False

    def get_user_id(self) -> Optional[str]:
        return self.session["user_id"]

    def set_user_id(self, user_id: Optional[str]) -> None:
        self.is_dirty = True
        self.session["user_id"] = user_id


SESSION_REPO = SessionRepository()
