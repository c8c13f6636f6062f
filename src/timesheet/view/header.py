# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from timesheet.model.user import User
from timesheet.view.state import get_show_header


def header(user: User, sub_header: Optional[str] = None) -> None:
    """Print the application header for a report.

    Args:
        user: The signed in user, shown with their role
        sub_header: Optional report name shown under the title
    """
    if not get_show_header():
        return

    print(Padding("[dark_orange]timesheet[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
    print(
        Padding(
            f"[plum1]{user['name']}[/plum1] [grey62]{user['role']}[/grey62]", (0, 1)
        )
    )
