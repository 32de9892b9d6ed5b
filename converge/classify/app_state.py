from converge.status import App, AppState

from .decision import Decision


def app_state_decision(app: App) -> Decision:
    """Deployed succeeds, failed fails, anything else keeps waiting."""
    state = app.status.summary.state
    match state:
        case AppState.DEPLOYED.value:
            return Decision.succeed(app.metadata.name)
        case AppState.FAILED.value:
            return Decision.fail(f"failed to install {app.metadata.name} chart")
        case _:
            return Decision.proceed()
