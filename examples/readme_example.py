import asyncio
import logging

from modelkit import MemoryAdapter, Model, ValidationError, bind_adapter


class Task(Model):
    def defaults(self):
        return {"status": "pending", "tags": []}

    def validate(self):
        if not self.get("title"):
            raise ValidationError("title is required")


Task.use("set:title", str.strip)
Task.use("set:tags", lambda tags: sorted(set(tags)))
Task.use("get:title", str.capitalize)


@Task.on("change:status")
def report_status(task):
    print(f"Task {task.get('title')!r} is now {task.get('status')}.")


@Task.on("save delete")
def report_persisted(task):
    print(f"Persisted: {task.to_json()}")


adapter = MemoryAdapter()
bind_adapter(Task, adapter)


async def main() -> None:
    task = Task(title="  write docs ", tags=["docs", "docs", "writing"])
    print("Changed before save:", sorted(task.changed))

    await task.save()
    print("Changed after save:", sorted(task.changed))

    task.set("status", "in_progress")
    await task.save()

    try:
        Task(title="   ").save()
    except ValidationError as e:
        print(f"Rejected: {e}")

    await task.delete()
    print(f"Records left: {len(adapter)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
