"""View components for the dashboard.

COMPONENTS registers the stateful components by path; ComponentMessage
routing looks them up here.
"""

from termdash.app.components.detail_panel import DETAIL_PATH, DetailPanel
from termdash.core.component import Component

COMPONENTS: dict[str, Component] = {
    DETAIL_PATH: DetailPanel(),
}
