"""Components layer - domain logic modules.

Components are leaf modules that:
- Do NOT import services or interfaces
- ARE imported and used BY services
- May import from: helpers, persistence, other components

Architecture:
- helpers/ = stdlib-only utilities and DTOs (pure, stateless)
- components/ = domain logic building blocks (this layer)
- services/ = DI, wiring, orchestration of components + persistence
- interfaces/ = HTTP presentation
"""
