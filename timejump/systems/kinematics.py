"""Semi-implicit Euler integration shared by every moving actor.

Velocity is updated before position; the jump arc depends on that order.
"""

from __future__ import annotations

from timejump.core.models import Actor


def decay_cooldown(cooldown: float | None, dt: float) -> float | None:
    """Count a cooldown down by *dt*; expired cooldowns become None (ready)."""
    if cooldown is None:
        return None
    remaining = cooldown - dt
    return remaining if remaining > 0 else None


def integrate(actor: Actor, dt: float) -> None:
    """Advance *actor* by one step of length *dt* seconds."""
    actor.velocity.x += actor.acceleration.x * dt
    actor.velocity.y += actor.acceleration.y * dt
    actor.position.x += actor.velocity.x * dt
    actor.position.y += actor.velocity.y * dt
    actor.attack_cooldown = decay_cooldown(actor.attack_cooldown, dt)
