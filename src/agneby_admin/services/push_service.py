"""Mobile push notifications for newly published records.

Delivery to a messaging service is not wired up yet; the back office
records each pending push in the log so it can be replayed by whichever
sender is connected later.
"""

from __future__ import annotations

import structlog

log = structlog.get_logger(__name__)


class PushNotifier:
    channel = "mobile"

    def announce(self, collection: str, document_id: str, title: str) -> None:
        payload = {"collection": collection, "id": document_id, "title": title}
        log.info("push_notification_pending", channel=self.channel, **payload)
