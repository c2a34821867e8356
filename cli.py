import argparse
import os

from dotenv import find_dotenv, load_dotenv

from client import DEFAULT_BASE_URL, SyncState, TaskDraft, TaskListClient
from models import PRIORITY_LABELS, Priority

def format_todo(todo):
    mark = "x" if todo.get("completed") else " "
    try:
        label = PRIORITY_LABELS[Priority(todo.get("importance"))]
    except ValueError:
        label = str(todo.get("importance"))
    return f"[{mark}] {todo.get('id')}  {todo.get('date')}  {label:<6}  {todo.get('task')}"

def build_parser():
    # .env is looked up from the directory the command runs in
    load_dotenv(find_dotenv(usecwd=True))
    parser = argparse.ArgumentParser(description="Manage the todo list on a running server.")
    parser.add_argument("--base-url", type=str, default=os.getenv("TODO_API_URL", DEFAULT_BASE_URL), help="Server URL.")
    parser.add_argument("--on-failure", choices=["rollback", "keep"], default="rollback", help="What to do with a change the server did not save.")
    parser.add_argument("--retries", type=int, default=0, help="Extra save attempts before giving up.")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    subparsers.add_parser("list", help="List all tasks.")

    parser_add = subparsers.add_parser("add", help="Add a task.")
    parser_add.add_argument("task", type=str, help="What needs to be done.")
    parser_add.add_argument("--date", type=str, required=True, help="Due date, YYYY-MM-DD.")
    parser_add.add_argument("--priority", choices=[p.value for p in Priority], default=Priority.NORMAL.value)

    parser_toggle = subparsers.add_parser("toggle", help="Mark a task done, or not done.")
    parser_toggle.add_argument("id", type=int)

    parser_priority = subparsers.add_parser("priority", help="Change the priority of a task.")
    parser_priority.add_argument("id", type=int)
    parser_priority.add_argument("level", choices=[p.value for p in Priority])

    parser_delete = subparsers.add_parser("delete", help="Delete a task.")
    parser_delete.add_argument("id", type=int)

    return parser

def run(args, client):
    """Executes one command. Returns the process exit code."""
    client.load()

    if args.command == "list":
        if not client.todos:
            print("No tasks.")
        for todo in client.todos:
            print(format_todo(todo))
        return 0

    if args.command == "add":
        try:
            created = client.create(TaskDraft(task=args.task, date=args.date, importance=Priority(args.priority)))
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        if created is None:
            print("Error: the task was not added.")
            return 1
        print(format_todo(created))
    elif args.command == "toggle":
        client.toggle_complete(args.id)
    elif args.command == "priority":
        client.change_priority(args.id, args.level)
    elif args.command == "delete":
        client.delete(args.id)

    if client.last_sync != SyncState.SETTLED:
        print(f"Warning: the server did not save this change ({client.last_sync.value}).")
        return 1
    return 0

def main():
    args = build_parser().parse_args()
    client = TaskListClient(args.base_url, on_failure=args.on_failure, retries=args.retries)
    raise SystemExit(run(args, client))

if __name__ == "__main__":
    main()
