from html import escape
from urllib.parse import urlencode

from lumina.config.settings import settings
from lumina.models.cart_line import CartLine
from lumina.models.chat_message import ChatMessage, ChatRole
from lumina.models.product import Category, Product

_HEAD = """
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <script src="https://cdn.tailwindcss.com"></script>
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap');
        body {{ font-family: 'Inter', sans-serif; }}
        .typing::after {{ content: '▍'; animation: blink 1s steps(1) infinite; color: #818cf8; }}
        @keyframes blink {{ 50% {{ opacity: 0; }} }}
    </style>
</head>
"""

STOREFRONT_HTML = """
<!DOCTYPE html>
<html lang="ko">
""" + _HEAD + """
<body class="min-h-screen flex flex-col text-gray-900 bg-white">
    <!-- Navigation -->
    <nav class="sticky top-0 z-30 bg-white/90 border-b border-gray-100">
        <div class="max-w-7xl mx-auto px-6 h-20 flex justify-between items-center">
            <div class="flex items-center gap-8">
                <a href="/" class="text-2xl font-serif font-bold tracking-tighter">Lumina.</a>
                {admin_link}
            </div>
            <div class="flex items-center gap-4 text-sm">
                <form method="get" action="/" class="hidden md:block">
                    <input type="hidden" name="category" value="{category}">
                    <input name="q" value="{query}" placeholder="Search..."
                           class="bg-gray-100 rounded-full px-4 py-2 w-56 focus:outline-none">
                </form>
                {session_html}
                <button onclick="post('/api/cart/toggle')" class="relative font-medium">
                    CART <span class="text-indigo-600">({cart_line_count})</span>
                </button>
            </div>
        </div>
    </nav>

    <main class="flex-1 max-w-7xl mx-auto px-6 py-16 w-full">
        <div class="flex justify-between items-end mb-12 gap-4">
            <div>
                <h2 class="text-3xl font-serif font-bold mb-2">Curated Picks</h2>
                <p class="text-gray-500 font-light">엄선된 프리미엄 컬렉션을 만나보세요.</p>
            </div>
            <div class="flex gap-8 border-b border-gray-100">{category_tabs}</div>
        </div>
        <div class="grid grid-cols-2 md:grid-cols-3 lg:grid-cols-4 gap-x-6 gap-y-12">
            {products_html}
        </div>
    </main>

    <!-- Cart drawer -->
    <aside class="fixed top-0 right-0 h-full w-full max-w-md bg-white z-50 shadow-2xl p-5 flex flex-col {cart_visibility}">
        <div class="flex justify-between items-center border-b pb-4">
            <h2 class="text-xl font-bold">장바구니 <span class="text-sm font-normal text-gray-500">({cart_line_count}개)</span></h2>
            <button onclick="post('/api/cart/toggle')">✕</button>
        </div>
        <div class="flex-1 overflow-y-auto py-4 space-y-6">{cart_html}</div>
        <div class="border-t pt-4 flex justify-between">
            <span class="text-gray-500">총 결제금액</span>
            <span class="text-2xl font-bold text-indigo-600">{currency}{cart_total}</span>
        </div>
    </aside>

    <!-- Auth modal -->
    <div id="authModal" class="{auth_visibility} fixed inset-0 z-50 flex items-center justify-center bg-black/50 p-4">
        <form onsubmit="login(event)" class="bg-white w-full max-w-md p-8 space-y-4">
            <h2 class="text-2xl font-serif font-bold">Welcome to Lumina</h2>
            <select id="authMode" class="w-full border p-2">
                <option value="sign-up">Sign Up</option>
                <option value="sign-in">Sign In</option>
            </select>
            <input id="authName" placeholder="Name" class="w-full border p-2">
            <input id="authEmail" type="email" placeholder="Email" class="w-full border p-2">
            <input id="authPassword" type="password" placeholder="Password" class="w-full border p-2">
            <p id="authError" class="text-sm text-red-600"></p>
            <button class="w-full bg-black text-white py-3 font-medium">Continue</button>
        </form>
    </div>

    <!-- Chat widget -->
    <button onclick="post('/api/chat/toggle')"
            class="fixed bottom-6 right-6 z-40 p-4 rounded-full shadow-lg bg-indigo-600 text-white">✨</button>
    <div id="chat" class="fixed bottom-24 right-6 w-full max-w-[360px] h-[500px] bg-white rounded-2xl shadow-2xl z-40 flex flex-col {chat_visibility}">
        <div class="bg-indigo-600 p-4 text-white rounded-t-2xl">
            <h3 class="font-bold">Lumi AI Assistant</h3>
            <p class="text-xs text-indigo-100">무엇이든 물어보세요!</p>
        </div>
        <div id="chatLog" class="flex-1 overflow-y-auto p-4 space-y-4 bg-gray-50">{chat_html}</div>
        <form onsubmit="sendChat(event)" class="p-3 border-t flex gap-2">
            <input id="chatInput" class="flex-1 bg-gray-100 rounded-xl p-2 text-sm" placeholder="어울리는 옷 추천해줘...">
            <button id="chatSend" class="px-3 rounded-xl bg-indigo-600 text-white text-sm">Send</button>
        </form>
    </div>

    <script>
        async function post(url, body, method) {{
            const res = await fetch(url, {{
                method: method || 'POST',
                headers: {{ 'Content-Type': 'application/json' }},
                body: body ? JSON.stringify(body) : undefined,
            }});
            if (!res.ok) {{
                const data = await res.json().catch(() => ({{}}));
                alert(data.detail || 'Request failed');
                return;
            }}
            location.reload();
        }}

        async function login(e) {{
            e.preventDefault();
            const res = await fetch('/auth/login', {{
                method: 'POST',
                headers: {{ 'Content-Type': 'application/json' }},
                body: JSON.stringify({{
                    mode:     document.getElementById('authMode').value,
                    name:     document.getElementById('authName').value,
                    email:    document.getElementById('authEmail').value,
                    password: document.getElementById('authPassword').value,
                }}),
            }});
            if (!res.ok) {{
                document.getElementById('authError').textContent = (await res.json()).detail;
                return;
            }}
            location.reload();
        }}

        async function sendChat(e) {{
            e.preventDefault();
            const input = document.getElementById('chatInput');
            const btn   = document.getElementById('chatSend');
            const text  = input.value;
            if (!text.trim() || btn.disabled) return;
            btn.disabled = true;
            input.value = '';

            const log = document.getElementById('chatLog');
            log.insertAdjacentHTML('beforeend', '<div class="flex justify-end"><div class="max-w-[85%] p-3 rounded-2xl text-sm bg-indigo-600 text-white"></div></div>');
            log.lastElementChild.firstElementChild.textContent = text;
            log.insertAdjacentHTML('beforeend', '<div class="flex justify-start"><div class="typing max-w-[85%] p-3 rounded-2xl whitespace-pre-wrap text-sm bg-white border"></div></div>');
            const bubble = log.lastElementChild.firstElementChild;

            try {{
                const res = await fetch('/api/chat/messages', {{
                    method: 'POST',
                    headers: {{ 'Content-Type': 'application/json' }},
                    body: JSON.stringify({{ text }}),
                }});
                const reader  = res.body.getReader();
                const decoder = new TextDecoder();
                while (true) {{
                    const {{ value, done }} = await reader.read();
                    if (done) break;
                    bubble.textContent += decoder.decode(value, {{ stream: true }});
                    log.scrollTop = log.scrollHeight;
                }}
            }} finally {{
                bubble.classList.remove('typing');
                btn.disabled = false;
                location.reload();
            }}
        }}
    </script>
</body>
</html>
"""

ADMIN_HTML = """
<!DOCTYPE html>
<html lang="ko">
""" + _HEAD + """
<body class="bg-gray-50 min-h-screen p-8">
    <div class="max-w-6xl mx-auto">
        <header class="flex justify-between items-end mb-10 border-b border-black pb-4">
            <div>
                <h1 class="text-4xl font-serif font-bold text-gray-900 mb-2">Dashboard</h1>
                <p class="text-gray-500">상품 목록 및 재고 관리</p>
                <div class="text-xs text-gray-400 mt-1">Signed in as {admin_name} | Products: {product_count}</div>
            </div>
            <div class="flex gap-3">
                <button onclick="setView('store')" class="px-4 py-2 bg-white border border-gray-300 text-sm">Back to Shop</button>
                <button onclick="openDraft('/admin/products/new')" class="bg-black text-white px-6 py-3 font-medium">+ Add Product</button>
            </div>
        </header>

        <div class="bg-white border border-gray-200 overflow-hidden">
            <table class="w-full text-left border-collapse">
                <thead>
                    <tr class="bg-gray-50 border-b text-xs uppercase tracking-widest text-gray-500">
                        <th class="p-4 font-medium">Product</th>
                        <th class="p-4 font-medium">Category</th>
                        <th class="p-4 font-medium">Price</th>
                        <th class="p-4 font-medium text-right">Actions</th>
                    </tr>
                </thead>
                <tbody class="divide-y divide-gray-100">
                    {rows_html}
                </tbody>
            </table>
        </div>
    </div>

    <script>
        async function setView(mode) {{
            await fetch('/api/view-mode', {{
                method: 'PUT',
                headers: {{ 'Content-Type': 'application/json' }},
                body: JSON.stringify({{ mode }}),
            }});
            location.reload();
        }}

        async function openDraft(url) {{
            const draft = await (await fetch(url)).json();
            const name  = prompt('Name', draft.name || '');
            if (name === null) return;
            const price = prompt('Price', draft.price || '');
            if (price === null) return;
            draft.name  = name;
            draft.price = parseInt(price, 10) || null;
            const res = await fetch('/admin/products', {{
                method: 'POST',
                headers: {{ 'Content-Type': 'application/json' }},
                body: JSON.stringify(draft),
            }});
            if (!res.ok) {{ alert((await res.json()).detail); return; }}
            location.reload();
        }}

        async function deleteProduct(id) {{
            if (!confirm('정말 삭제하시겠습니까?')) return;
            await fetch('/admin/products/' + id + '?confirm=true', {{ method: 'DELETE' }});
            location.reload();
        }}
    </script>
</body>
</html>
"""


def format_price(amount: int) -> str:
    return f"{amount:,}"


def generate_category_tab(category: Category, selected: Category, query: str) -> str:
    active = "text-black border-b-2 border-black" if category is selected else "text-gray-400 hover:text-gray-600"
    return (
        f'<a href="/?{escape(urlencode({"category": category.value, "q": query}))}" '
        f'class="pb-2 text-sm font-bold uppercase tracking-wider {active}">{escape(category.value)}</a>'
    )


def generate_product_card(product: Product) -> str:
    tags = " ".join(f"#{escape(t)}" for t in product.tags)
    return f"""
    <div class="group">
        <div class="aspect-[2/3] bg-gray-100 overflow-hidden mb-4">
            <img src="{escape(product.image)}" alt="{escape(product.name)}" class="w-full h-full object-cover">
        </div>
        <span class="text-xs text-gray-400 uppercase">{escape(product.category.value)}</span>
        <h3 class="font-medium">{escape(product.name)}</h3>
        <div class="text-gray-900">{settings.currency_symbol}{format_price(product.price)}</div>
        <div class="text-xs text-gray-400 mt-1">{tags}</div>
        <button onclick="post('/api/cart/items', {{product_id: {product.id}}})"
                class="mt-3 w-full border border-black py-2 text-sm hover:bg-black hover:text-white">Add to Cart</button>
    </div>
    """


def generate_cart_line(line: CartLine) -> str:
    return f"""
    <div class="flex gap-4">
        <img src="{escape(line.image)}" alt="{escape(line.name)}" class="w-20 h-24 object-cover bg-gray-100">
        <div class="flex-1">
            <h3 class="font-medium">{escape(line.name)}</h3>
            <span class="font-bold">{settings.currency_symbol}{format_price(line.price)}</span>
            <div class="flex items-center gap-3 mt-2">
                <button onclick="post('/api/cart/items/{line.id}', {{delta: -1}}, 'PATCH')">−</button>
                <span>{line.quantity}</span>
                <button onclick="post('/api/cart/items/{line.id}', {{delta: 1}}, 'PATCH')">+</button>
                <button onclick="post('/api/cart/items/{line.id}', null, 'DELETE')" class="ml-auto text-gray-400">삭제</button>
            </div>
        </div>
    </div>
    """


def generate_chat_message(message: ChatMessage) -> str:
    if message.role is ChatRole.USER:
        return (
            '<div class="flex justify-end"><div class="max-w-[85%] p-3 rounded-2xl whitespace-pre-wrap '
            f'text-sm bg-indigo-600 text-white">{escape(message.text)}</div></div>'
        )
    typing = " typing" if message.streaming else ""
    return (
        f'<div class="flex justify-start"><div class="max-w-[85%] p-3 rounded-2xl whitespace-pre-wrap '
        f'text-sm bg-white border{typing}">{escape(message.text)}</div></div>'
    )


def generate_admin_row(product: Product) -> str:
    return f"""
    <tr class="hover:bg-gray-50/50">
        <td class="p-4">
            <div class="flex items-center gap-4">
                <img src="{escape(product.image)}" class="w-12 h-16 object-cover bg-gray-100">
                <span class="font-medium">{escape(product.name)}</span>
            </div>
        </td>
        <td class="p-4 text-sm">{escape(product.category.value)}</td>
        <td class="p-4 text-sm">{settings.currency_symbol}{format_price(product.price)}</td>
        <td class="p-4 text-right space-x-3">
            <button onclick="openDraft('/admin/products/{product.id}/edit')" class="text-sm underline">Edit</button>
            <button onclick="deleteProduct({product.id})" class="text-sm text-red-600 underline">Delete</button>
        </td>
    </tr>
    """
