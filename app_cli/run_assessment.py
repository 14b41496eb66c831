from __future__ import annotations
from readiness_core.engine import AssessmentSession
from readiness_core.errors import InvalidAnswer
from readiness_core.intro import intro_content
from readiness_core.reporting import render_text

BACK = "<"

def ask(prompt: str, options=None) -> str:
    if options:
        print(prompt)
        for opt in options: print(f"  [{opt['value']}] {opt['label']}")
        values = {o["value"] for o in options}
        while True:
            v = input(f"Your choice ({BACK}=back): ").strip()
            if v == BACK or v in values: return v
            print("Enter one of the listed values.")
    else:
        return input(prompt + " ").strip()

def show_intro() -> None:
    c = intro_content()
    print(f"\n{c['title']}\n{c['subtitle']}\n\n{c['summary']}\n")
    print(f"Takes {c['duration']}.")
    print("Careers: " + ", ".join(c["careers"]))
    print("Traits:  " + ", ".join(c["traits"]))

def step_header(view) -> None:
    print(f"\n--- Step {view['step'] + 1} of {view['total_steps']}: {view['title']} ({view['progress']}% complete) ---")

def run(session: AssessmentSession) -> None:
    while True:
        view = session.view()
        name = view["step_name"]
        if name == "intro":
            step_header(view); show_intro()
            ask("Press Enter to start the assessment.")
            session.start(); continue
        if name == "results":
            step_header(view)
            print(render_text(session.report()))
            v = input(f"\n[r] retake  [{BACK}] back  [q] quit: ").strip().lower()
            if v == "r": session.retake(); continue
            if v == BACK: session.retreat(); continue
            return
        sec = view["section"]; q = sec["question"]
        if sec["index"] == 0 and sec["answer"] is None: step_header(view)
        print(f"\nQuestion {sec['index'] + 1} of {sec['total']} [{q['tag']}]")
        v = ask(q["text"], q["options"])
        if v == BACK:
            session.retreat(); continue
        try:
            session.select_answer(q["id"], v)
        except InvalidAnswer as e:
            print(e); continue
        fb = session.view()["section"]["feedback"]
        if fb:
            print("Correct!" if fb["correct"] else f"Not quite, the answer is [{fb['correct_value']}].")
            if fb["explanation"]: print(f"  {fb['explanation']}")
        session.advance()

def main():
    print("Career Readiness Assessment")
    try:
        run(AssessmentSession())
    except (KeyboardInterrupt, EOFError):
        print("\nStopped by user.")

if __name__ == "__main__": main()
