"""iframe sandbox settings for each render mode."""

from __future__ import annotations

from dataclasses import dataclass

from .models import RenderMode


@dataclass(frozen=True, slots=True)
class SandboxPolicy:
    flags: tuple[str, ...]
    interactive: bool = True

    @property
    def attribute(self) -> str:
        return " ".join(self.flags)


PREVIEW_POLICY = SandboxPolicy(flags=("allow-scripts",))

# Only the published page of a trusted author gets same-origin, forms and popups.
PUBLISHED_POLICY = SandboxPolicy(
    flags=(
        "allow-scripts",
        "allow-same-origin",
        "allow-modals",
        "allow-forms",
        "allow-popups",
    )
)

CARD_POLICY = SandboxPolicy(flags=("allow-scripts",), interactive=False)

_POLICIES = {
    RenderMode.PREVIEW: PREVIEW_POLICY,
    RenderMode.PUBLISHED: PUBLISHED_POLICY,
    RenderMode.CARD: CARD_POLICY,
}


def sandbox_policy(mode: RenderMode) -> SandboxPolicy:
    return _POLICIES[mode]


__all__ = ["SandboxPolicy", "sandbox_policy", "PREVIEW_POLICY", "PUBLISHED_POLICY", "CARD_POLICY"]
