import asyncio
import os
import sys
from typing import Any, Dict, List

from dotenv import load_dotenv
from openai import AsyncOpenAI

from planner_actions import (
    ActionConfig,
    ActionRunner,
    LocalGitEnvironment,
    LocalSessionResolver,
    OpenAIActionAdapter,
    OpenAIToolRegistry,
    PlannerNotes,
)
from planner_actions.action_core import ActionContext, PLANNER_TOOL_FACTORIES, setup_logging

load_dotenv()

SYSTEM_PROMPT = (
    "You are planning a change to the repository. Only read files: use the shell and search tools "
    "to gather context and record what the programmer needs with take_notes. Reply without tool "
    "calls once your plan is ready."
)


async def main(repo_path: str, task: str) -> None:
    """
    Runs a read-only planning loop against a local git checkout.
    """
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        print("Error: OPENAI_API_KEY not found in environment variables.")
        return

    setup_logging()
    config = ActionConfig.from_env()
    environment = LocalGitEnvironment(repo_path)
    resolver = LocalSessionResolver({"local": environment})
    runner = ActionRunner(resolver, config=config)
    notes = PlannerNotes()

    # Only used to describe the tools to the model; the runner builds its own per batch
    context = ActionContext(environment=environment, working_directory=repo_path, notes=notes, config=config)
    tools = OpenAIToolRegistry.from_definitions(factory(context) for factory in PLANNER_TOOL_FACTORIES).tool_object

    client = AsyncOpenAI(api_key=api_key)
    messages: List[Dict[str, Any]] = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": task},
    ]

    for _ in range(10):
        response = await client.chat.completions.create(
            model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            messages=messages,  # type: ignore[arg-type]
            tools=tools,  # type: ignore[arg-type]
        )
        assistant = OpenAIActionAdapter.from_chat_completion(response)
        messages.append(response.choices[0].message.model_dump(exclude_none=True))

        if not assistant.tool_calls:
            print(f"Plan:\n{assistant.content}")
            break

        tool_messages = await runner.take_actions(
            assistant, session_id="local", working_directory=repo_path, notes=notes
        )
        messages.extend(OpenAIActionAdapter.build_tool_messages(tool_messages))

    print("\nNotes:")
    for note in notes.items:
        print(f"- {note}")


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python plan_step.py <repo_path> <task>")
        sys.exit(1)
    asyncio.run(main(sys.argv[1], " ".join(sys.argv[2:])))
