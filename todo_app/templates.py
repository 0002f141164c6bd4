# Fragment swapped into #content after every create/update
CONTENT_TEMPLATE = '''
<form hx-boost="true" hx-post="/create" class="form" hx-target="#content">
    <input name="title" class="input" type="text" placeholder="What needs to be done?" autofocus>
</form>
{% if todos %}
<ul>
    {% for todo in todos %}
    <li class="todo-item{% if todo.done %} done{% endif %}">
        <form hx-target="#content" class="inline-form">
            <input name="id" type="hidden" value="{{ todo.id }}">
            <input class="check" name="done" type="checkbox" hx-trigger="click" hx-post="/update"{% if todo.done %} checked{% endif %}>
            {{ todo.title }}
        </form>
    </li>
    {% endfor %}
</ul>
{% endif %}
'''

# Full document served on the initial page load
PAGE_TEMPLATE = '''<!DOCTYPE html>
<html lang="en-US" dir="ltr">
<head>
    <title>{{ title }}</title>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width,initial-scale=1" />
    <style type="text/css">
        .form { display: flex; flex-direction: column; }
        .input { padding: 12px; font-size: 1.2em; }
        .todo-item { display: flex; flex-direction: row; font-family: sans-serif; font-size: 2.0em; }
        .done { color: #999; text-decoration: line-through; }
        input.check { transform: scale(2); margin: 12px; }
        .inline-form { display: flex; flex-direction: row; }
        ul { list-style-type: none; padding: 0; }
    </style>
    <link rel="icon" href="data:,">
    <script src="https://unpkg.com/htmx.org@1.9.12"></script>
</head>
<body>
    <div class="content" id="content">
        {% include content_template %}
    </div>
</body>
</html>
'''
