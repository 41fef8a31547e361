from __future__ import annotations

from . import console
from .plan import RegistrationPlan


def print_manual_fallback(plan: RegistrationPlan) -> None:
    console.notice(f"To use Code Zen, add this to your {plan.config_file}:")
    print()
    print(plan.snippet)
    print()


def apply_registration(plan: RegistrationPlan) -> None:
    path = plan.config_file

    if plan.action == "create":
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(plan.snippet + "\n", encoding="utf-8", newline="")
        console.success(f"{path.name} created successfully!")
    elif plan.action == "append":
        with path.open("a", encoding="utf-8", newline="") as f:
            f.write("\n\n" + plan.snippet + "\n")
        console.success(f"Code Zen configuration added to {path.name}")
    elif plan.action == "already-configured":
        console.notice(f"Code Zen already configured in {path.name}")
    else:
        console.notice(f"Skipped {path.name} modification.")
        print_manual_fallback(plan)
