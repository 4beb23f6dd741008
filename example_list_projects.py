#!/usr/bin/env python3
"""Example script demonstrating the ways to list projects.

Requires Application Default Credentials (`gcloud auth application-default login`).

Usage:
    python example_list_projects.py
"""

from itertools import islice

from pdum.resource import Resource


def main():
    """List projects with auto-pagination, manual paging, streaming and callbacks."""
    resource = Resource()

    print("=" * 60)
    print("Projects")
    print("=" * 60)

    # Fetch every page and accumulate the results
    print("\n1. Auto-paginated (first 10):")
    projects, _, _ = resource.get_projects({"maxResults": 10})
    for project in projects:
        print(f"   {project.project_id} ({project.metadata.get('lifecycleState')})")

    # Page through manually with the continuation query
    print("\n2. Manual paging, 5 per page, 2 pages:")
    query = {"autoPaginate": False, "pageSize": 5}
    for page in range(2):
        if not query:
            break
        projects, query, _ = resource.get_projects(query)
        print(f"   page {page + 1}: {[p.project_id for p in projects]}")

    # Lazily stream; stopping early avoids further API requests
    print("\n3. Streaming the first 3 active projects:")
    active = resource.get_projects_stream({"filter": "lifecycleState:ACTIVE"})
    for project in islice(active, 3):
        print(f"   {project.project_id}")

    # Error-first callback delivery
    print("\n4. Callback style:")

    def on_projects(err, projects, next_query, api_response):
        if err:
            print(f"   error: {err}")
            return
        print(f"   {len(projects)} project(s), more: {next_query is not None}")

    resource.get_projects({"autoPaginate": False}, callback=on_projects)

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
