import json

from claude_agent_sdk import create_sdk_mcp_server, tool

from . import extract_tasks


@tool(
    name="extract_tasks",
    description=(
        "Extract actionable tasks from a speech transcription. "
        "Use this tool whenever the user shares a voice note, meeting transcript, or dictated text and asks "
        "what they need to do, what their follow ups are, or to turn it into a todo list. Each task is "
        "returned with a category: quick (a few minutes), deep (focused work), or idea (something to explore)."
    ),
    input_schema={"transcription": str},
)
async def extract_tasks_tool(args):
    """Return the tasks found in ``args["transcription"]`` as a JSON text block."""
    transcription = args.get("transcription")
    if not isinstance(transcription, str):
        return {
            "content": [{"type": "text", "text": "Extraction error: transcription must be a string"}],
            "is_error": True,
        }

    tasks = [task.to_dict() for task in extract_tasks(transcription)]
    return {
        "content": [
            {"type": "text", "text": json.dumps(tasks)},
        ],
    }


fieldy_tasks_mcp_server = create_sdk_mcp_server(
    name="tasks",
    tools=[extract_tasks_tool],
)
