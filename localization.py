# Localization for the RepairHub bot

from logging_config import logger

LANGUAGES = {"en": "🇬🇧 English", "ar": "🇪🇬 العربية"}

TEXTS = {
    "en": {
        # Greeting
        "choose_language": "🌍 Choose your language / اختر لغتك",
        "language_changed": "✅ Language set to English",
        "welcome": """🔧 <b>Welcome to RepairHub!</b>

Buy new and used devices and spare parts,
or get your device repaired by a trusted shop.

🛒 <b>Explore</b> - products from every shop
🛠 <b>Repair</b> - request a quote in a minute
📦 <b>Track</b> - follow your orders step by step

Log in or create an account to get started.""",
        "welcome_back": "👋 <b>Welcome back!</b>\n\nLogged in as {email}\n🏠 {home}",
        "help": """ℹ️ <b>RepairHub help</b>

/start - main screen
/menu - show the menu
/login - log in
/logout - log out
/forgot - reset your password
/language - change language
/cancel - cancel the current action""",
        "main_menu": "🏠 Main menu",
        "unknown_command": "🤔 I did not understand that. Use the menu below or /help.",
        "action_cancelled": "❌ Cancelled",
        "rate_limited": "⏳ Too many requests. Please slow down a little.",
        "login_required": "🔐 Please log in to continue.",
        "session_expired": "🔐 Your session has expired. Please log in again.",
        # Bot commands
        "cmd_start": "Main screen",
        "cmd_menu": "Show the menu",
        "cmd_login": "Log in",
        "cmd_language": "Change language",
        "cmd_help": "Help",
        "cmd_cancel": "Cancel the current action",
        # Home screens
        "home_customer": "Customer",
        "home_shop": "Shop",
        "home_delivery": "Delivery",
        "home_assigner": "Assigner",
        "home_admin": "Admin",
        # Reply menus
        "menu_explore": "🛒 Explore",
        "menu_cart": "🧺 Cart",
        "menu_orders": "📦 My orders",
        "menu_repair": "🛠 Repair",
        "menu_offers": "🔥 Offers",
        "menu_notifications": "🔔 Notifications",
        "menu_account": "👤 Account",
        "menu_shop_dashboard": "📊 Dashboard",
        "menu_shop_orders": "📦 Orders",
        "menu_shop_repairs": "🛠 Repair requests",
        "menu_shop_offers": "🔥 My offers",
        "menu_delivery_orders": "📦 Available orders",
        "menu_delivery_repairs": "🛠 Available repairs",
        "menu_my_deliveries": "🚚 My deliveries",
        "menu_assign_orders": "📦 Orders to assign",
        "menu_assign_repairs": "🛠 Repairs to assign",
        "menu_assign_log": "📜 Assignment log",
        "menu_admin_dashboard": "📊 Dashboard",
        "menu_admin_shops": "🏪 Shops",
        "menu_admin_users": "👥 Users",
        "menu_admin_deliveries": "🚚 Deliveries",
        "menu_admin_assigners": "🧭 Assigners",
        "menu_admin_finance": "💰 Finance",
        "menu_login": "🔐 Log in",
        "menu_register": "📝 Register",
        "menu_language": "🌍 Language",
        "menu_logout": "🚪 Log out",
        "cancel": "❌ Cancel",
        # Buttons
        "btn_accept": "✅ Accept",
        "btn_reject": "❌ Reject",
        "btn_accept_quote": "✅ Accept quote",
        "btn_reject_quote": "❌ Reject quote",
        "btn_add_address": "➕ Add address",
        "btn_add_to_cart": "🧺 Add to cart",
        "btn_addresses": "📍 My addresses",
        "btn_back": "⬅️ Back",
        "btn_cancel": "❌ Cancel",
        "btn_cancel_order": "❌ Cancel order",
        "btn_cancel_repair": "❌ Cancel request",
        "btn_checkout": "✅ Checkout",
        "btn_clear_cart": "🗑 Clear cart",
        "btn_my_repairs": "📋 My requests",
        "btn_new_repair": "➕ New request",
        "btn_pay_now": "💳 Pay now",
        "btn_place_order": "✅ Place order",
        "btn_refresh": "🔄 Refresh",
        "btn_view_order": "📦 View order",
        "btn_resend_otp": "🔁 Resend code",
        "btn_search": "🔍 Search",
        "btn_send_quote": "💰 Send quote",
        "btn_yes": "✅ Yes",
        "btn_no": "❌ No",
        # Login
        "login_email": "📧 Enter your email:",
        "login_password": "🔑 Enter your password:",
        "login_failed": "❌ Login failed: {reason}",
        "login_success": "✅ You are logged in.\n🏠 {home}",
        "subscription_renewal": (
            "⚠️ The subscription of shop {email} has expired.\n"
            "Renew it on the RepairHub website to continue."
        ),
        "logged_out": "👋 You have been logged out.",
        "forgot_email": "📧 Enter the email of your account:",
        "forgot_sent": "📬 If {email} is registered, a reset link is on its way.",
        # Registration
        "register_kind": "📝 What kind of account do you need?",
        "register_kind_user": "👤 Customer",
        "register_kind_shop": "🏪 Shop",
        "register_kind_delivery": "🚚 Delivery",
        "register_kind_assigner": "🧭 Assigner",
        "register_name": "✍️ Enter your name:",
        "register_email": "📧 Enter your email:",
        "register_password": "🔑 Choose a password (at least 6 characters):",
        "register_otp": "📨 We sent a code to {email}. Enter it here:",
        "register_verified": "🎉 Your account is verified. Log in to continue.",
        "otp_resent": "📨 A new code was sent.",
        # Validation errors
        "error_email": "⚠️ That does not look like a valid email.",
        "error_password": "⚠️ The password must be at least 6 characters long.",
        "error_otp": "⚠️ Enter the code from the email.",
        "error_name": "⚠️ Enter a name.",
        "error_price": "⚠️ Enter a positive price, for example 250 or 99.50",
        "error_address": "⚠️ Choose a delivery address first.",
        "error_payment_method": "⚠️ Choose a payment method first.",
        "error_description": "⚠️ Describe the problem in a few words.",
        "error_device_category": "⚠️ Choose a device type.",
        "error_delivery_method": "⚠️ Choose a delivery method.",
        "error_status": "⚠️ This status cannot be set here.",
        "error_quantity": "⚠️ Invalid quantity.",
        "error_street": "⚠️ Enter a street.",
        "error_city": "⚠️ Enter a city.",
        "error_not_found": "❌ Not found. It may have been removed.",
        "error_connection": "📡 RepairHub is not reachable right now. Try again in a minute.",
        "error_unexpected": "❌ Something went wrong. Please try again.",
        # Explore
        "explore_title": "🛒 <b>Products</b>",
        "explore_empty": "Nothing matches these filters.",
        "price": "Price",
        "in_stock": "In stock: {count}",
        "out_of_stock": "Out of stock",
        "cart_added": "🧺 Added to cart",
        "condition_all": "All",
        "condition_NEW": "New",
        "condition_USED": "Used",
        "filter": "Filter",
        "filter_all": "All",
        "filter_pending": "Pending",
        "filter_approved": "Approved",
        "filter_suspended": "Suspended",
        # Cart and checkout
        "cart_title": "🧺 <b>Your cart</b> ({count} items)",
        "cart_empty": "🧺 Your cart is empty.",
        "cart_update_failed": "❌ Could not update the cart. The previous quantity was restored.",
        "total": "Total",
        "checkout_title": "🧾 <b>Order summary</b>",
        "checkout_address": "📍 Choose a delivery address:",
        "checkout_no_address": "📍 You have no saved addresses. Add one in 👤 Account first.",
        "checkout_payment": "💳 Choose a payment method:",
        "checkout_cancelled": "❌ Checkout cancelled.",
        "order_placed": "✅ Order #{order_id} placed!",
        "pay_by_card_hint": "💳 Use the button below to pay by card.",
        "payment_start_failed": "⚠️ Card payment could not be started. Your order is saved, try paying again below or later from 📦 My orders.",
        "pay_CASH": "💵 Cash",
        "pay_CREDIT_CARD": "💳 Card",
        "pay_DEBIT_CARD": "💳 Debit card",
        "pay_BANK_TRANSFER": "🏦 Bank transfer",
        "pay_MOBILE_WALLET": "📱 Mobile wallet",
        # Orders
        "orders_title": "📦 <b>My orders</b>",
        "orders_empty": "You have no orders yet.",
        "order_title": "📦 <b>Order #{order_id}</b>",
        "tracking_title": "🚦 <b>Tracking</b>",
        # Repairs
        "repair_menu": "🛠 <b>Repair</b>\n\nRequest a quote from a repair shop or follow your requests.",
        "repair_no_shops": "😔 No repair shops are available right now.",
        "repair_describe": "✍️ Describe the problem with your device:",
        "repair_created": "✅ Repair request #{request_id} sent. The shop will reply with a quote.",
        "repair_no_quote": "⏳ The shop has not sent a quote yet.",
        "repair_quote_accepted": "✅ Quote accepted.",
        "repair_quote_hint": "💬 The shop sent a quote. Accept it to choose delivery and payment.",
        "repair_title": "🛠 <b>Repair request #{request_id}</b>",
        "repairs_title": "🛠 <b>My repair requests</b>",
        "repairs_empty": "You have no repair requests yet.",
        "quote": "Quote",
        "device_MOBILE": "📱 Mobile",
        "device_LAPTOP": "💻 Laptop",
        "device_TABLET": "📲 Tablet",
        "device_DESKTOP": "🖥 Desktop",
        "device_TV": "📺 TV",
        "device_OTHER": "🔧 Other",
        "delivery_HOME_DELIVERY": "🚚 Home delivery",
        "delivery_SHOP_VISIT": "🏪 I will visit the shop",
        "delivery_PICKUP": "📦 Courier pickup",
        "wizard_step": "Step {index}/{total}: <b>{title}</b>",
        "wizard_device_type": "Device type",
        "wizard_select_shop": "Shop",
        "wizard_describe": "Problem",
        "wizard_delivery_address": "Delivery & address",
        "wizard_payment_method": "Payment",
        # Offers
        "offers_title": "🔥 <b>Offers</b>",
        "offers_empty": "No active offers right now.",
        "offer_until": "until {date}",
        # Account
        "account_profile": "👤 <b>{name}</b>\n📧 {email}\n📞 {phone}",
        "addresses_title": "📍 <b>My addresses</b>",
        "addresses_empty": "No saved addresses yet.",
        "address_street": "🏠 Enter the street and building:",
        "address_city": "🏙 Enter the city:",
        "address_saved": "✅ Address saved: {address}",
        # Notifications
        "notifications_title": "🔔 <b>Notifications</b>",
        "notifications_empty": "No notifications.",
        # Shop
        "shop_dashboard_title": "📊 <b>Shop dashboard</b>",
        "subscription": "Subscription",
        "pending_orders": "Pending orders",
        "unread_notifications": "Unread notifications",
        "low_stock_title": "⚠️ <b>Low stock</b>",
        "shop_offers_title": "🔥 <b>My offers</b>",
        "shop_quote_prompt": "💰 Enter the quote for request #{request_id} in {currency}:",
        "quote_sent": "✅ Quote sent.",
        # Delivery and assigner
        "jobs_avail_title": "📋 <b>Available: {kind}</b>",
        "jobs_mine_title": "🚚 <b>My jobs: {kind}</b>",
        "jobs_queue_title": "🧭 <b>Awaiting assignment: {kind}</b>",
        "job_kind_orders": "orders",
        "job_kind_repair": "repairs",
        "jobs_empty": "Nothing here right now.",
        "job_update": "🚚 Update the status of job #{job_id}:",
        "my_deliveries": "🚚 Which jobs do you want to see?",
        "choose_courier": "👤 Choose a delivery person for #{job_id}:",
        "no_couriers": "😔 No delivery persons are available.",
        "assign_log_title": "📜 <b>Assignment log</b>",
        "assign_log_empty": "No assignments yet.",
        # Admin
        "admin_dashboard_title": "📊 <b>Admin dashboard</b>",
        "admin_kind_shops": "🏪 Shops",
        "admin_kind_users": "👥 Users",
        "admin_kind_deliveries": "🚚 Deliveries",
        "admin_kind_assigners": "🧭 Assigners",
        "admin_kind_orders": "📦 Orders",
        "admin_kind_repairs": "🛠 Repairs",
        "moderation_title": "<b>{kind}</b>",
        "moderation_empty": "Nothing matches this filter.",
        "admin_search_prompt": "🔍 Enter a name, email or phone:",
        "admin_search_applied": "🔍 Search applied.",
        "admin_action_done": "✅ Done for #{item_id}",
        "admin_delete_confirm": "🗑 Delete {kind} #{item_id}? This cannot be undone.",
        "finance_title": "💰 <b>Financial report</b>",
        "finance_total": "Transactions",
        "finance_revenue": "Revenue",
        "finance_user_title": "👤 <b>User transactions</b>",
        # Pagination
        "page_footer": "Page {page}/{pages} · {total} total",
        # Statuses
        "status_PENDING": "Pending",
        "status_CONFIRMED": "Confirmed",
        "status_PROCESSING": "Processing",
        "status_FINISHPROCESSING": "Ready",
        "status_SHIPPED": "Shipped",
        "status_DELIVERED": "Delivered",
        "status_CANCELLED": "Cancelled",
        "status_SUBMITTED": "Submitted",
        "status_QUOTE_PENDING": "Preparing quote",
        "status_QUOTE_SENT": "Quote sent",
        "status_QUOTE_APPROVED": "Quote approved",
        "status_QUOTE_REJECTED": "Quote rejected",
        "status_DEVICE_COLLECTED": "Device collected",
        "status_REPAIRING": "Repairing",
        "status_REPAIR_COMPLETED": "Repair completed",
        "status_DEVICE_DELIVERED": "Device delivered",
        "status_FAILED": "Failed",
        "status_ASSIGNED": "Assigned",
        "status_PICKED_UP": "Picked up",
        "status_IN_TRANSIT": "In transit",
        "status_APPROVED": "Approved",
        "status_SUSPENDED": "Suspended",
        "status_SUCCESS": "Successful",
    },
    "ar": {
        # Greeting
        "choose_language": "🌍 اختر لغتك / Choose your language",
        "language_changed": "✅ تم تغيير اللغة إلى العربية",
        "welcome": """🔧 <b>مرحبًا بك في RepairHub!</b>

اشترِ أجهزة جديدة ومستعملة وقطع غيار،
أو أصلح جهازك لدى محل موثوق.

🛒 <b>تصفح</b> - منتجات كل المحلات
🛠 <b>إصلاح</b> - اطلب عرض سعر في دقيقة
📦 <b>تتبع</b> - تابع طلباتك خطوة بخطوة

سجّل الدخول أو أنشئ حسابًا للبدء.""",
        "welcome_back": "👋 <b>أهلًا بعودتك!</b>\n\nتم تسجيل الدخول باسم {email}\n🏠 {home}",
        "help": """ℹ️ <b>مساعدة RepairHub</b>

/start - الشاشة الرئيسية
/menu - عرض القائمة
/login - تسجيل الدخول
/logout - تسجيل الخروج
/forgot - استعادة كلمة المرور
/language - تغيير اللغة
/cancel - إلغاء الإجراء الحالي""",
        "main_menu": "🏠 القائمة الرئيسية",
        "unknown_command": "🤔 لم أفهم ذلك. استخدم القائمة أو /help.",
        "action_cancelled": "❌ تم الإلغاء",
        "rate_limited": "⏳ طلبات كثيرة جدًا. تمهّل قليلًا من فضلك.",
        "login_required": "🔐 سجّل الدخول للمتابعة.",
        "session_expired": "🔐 انتهت جلستك. سجّل الدخول مرة أخرى.",
        # Bot commands
        "cmd_start": "الشاشة الرئيسية",
        "cmd_menu": "عرض القائمة",
        "cmd_login": "تسجيل الدخول",
        "cmd_language": "تغيير اللغة",
        "cmd_help": "مساعدة",
        "cmd_cancel": "إلغاء الإجراء الحالي",
        # Home screens
        "home_customer": "عميل",
        "home_shop": "محل",
        "home_delivery": "توصيل",
        "home_assigner": "موزّع مهام",
        "home_admin": "مدير",
        # Reply menus
        "menu_explore": "🛒 تصفح",
        "menu_cart": "🧺 السلة",
        "menu_orders": "📦 طلباتي",
        "menu_repair": "🛠 إصلاح",
        "menu_offers": "🔥 العروض",
        "menu_notifications": "🔔 الإشعارات",
        "menu_account": "👤 حسابي",
        "menu_shop_dashboard": "📊 لوحة التحكم",
        "menu_shop_orders": "📦 الطلبات",
        "menu_shop_repairs": "🛠 طلبات الإصلاح",
        "menu_shop_offers": "🔥 عروضي",
        "menu_delivery_orders": "📦 طلبات متاحة",
        "menu_delivery_repairs": "🛠 إصلاحات متاحة",
        "menu_my_deliveries": "🚚 توصيلاتي",
        "menu_assign_orders": "📦 طلبات للتوزيع",
        "menu_assign_repairs": "🛠 إصلاحات للتوزيع",
        "menu_assign_log": "📜 سجل التوزيع",
        "menu_admin_dashboard": "📊 لوحة التحكم",
        "menu_admin_shops": "🏪 المحلات",
        "menu_admin_users": "👥 المستخدمون",
        "menu_admin_deliveries": "🚚 المندوبون",
        "menu_admin_assigners": "🧭 الموزّعون",
        "menu_admin_finance": "💰 المالية",
        "menu_login": "🔐 تسجيل الدخول",
        "menu_register": "📝 إنشاء حساب",
        "menu_language": "🌍 اللغة",
        "menu_logout": "🚪 تسجيل الخروج",
        "cancel": "❌ إلغاء",
        # Buttons
        "btn_accept": "✅ قبول",
        "btn_reject": "❌ رفض",
        "btn_accept_quote": "✅ قبول العرض",
        "btn_reject_quote": "❌ رفض العرض",
        "btn_add_address": "➕ إضافة عنوان",
        "btn_add_to_cart": "🧺 أضف إلى السلة",
        "btn_addresses": "📍 عناويني",
        "btn_back": "⬅️ رجوع",
        "btn_cancel": "❌ إلغاء",
        "btn_cancel_order": "❌ إلغاء الطلب",
        "btn_cancel_repair": "❌ إلغاء الطلب",
        "btn_checkout": "✅ إتمام الشراء",
        "btn_clear_cart": "🗑 إفراغ السلة",
        "btn_my_repairs": "📋 طلباتي",
        "btn_new_repair": "➕ طلب جديد",
        "btn_pay_now": "💳 ادفع الآن",
        "btn_place_order": "✅ تأكيد الطلب",
        "btn_refresh": "🔄 تحديث",
        "btn_view_order": "📦 عرض الطلب",
        "btn_resend_otp": "🔁 إعادة إرسال الرمز",
        "btn_search": "🔍 بحث",
        "btn_send_quote": "💰 إرسال عرض سعر",
        "btn_yes": "✅ نعم",
        "btn_no": "❌ لا",
        # Login
        "login_email": "📧 أدخل بريدك الإلكتروني:",
        "login_password": "🔑 أدخل كلمة المرور:",
        "login_failed": "❌ فشل تسجيل الدخول: {reason}",
        "login_success": "✅ تم تسجيل الدخول.\n🏠 {home}",
        "subscription_renewal": (
            "⚠️ انتهى اشتراك المحل {email}.\n"
            "جدّده من موقع RepairHub للمتابعة."
        ),
        "logged_out": "👋 تم تسجيل خروجك.",
        "forgot_email": "📧 أدخل البريد الإلكتروني لحسابك:",
        "forgot_sent": "📬 إذا كان {email} مسجلًا فسيصلك رابط الاستعادة.",
        # Registration
        "register_kind": "📝 ما نوع الحساب الذي تحتاجه؟",
        "register_kind_user": "👤 عميل",
        "register_kind_shop": "🏪 محل",
        "register_kind_delivery": "🚚 مندوب توصيل",
        "register_kind_assigner": "🧭 موزّع مهام",
        "register_name": "✍️ أدخل اسمك:",
        "register_email": "📧 أدخل بريدك الإلكتروني:",
        "register_password": "🔑 اختر كلمة مرور (6 أحرف على الأقل):",
        "register_otp": "📨 أرسلنا رمزًا إلى {email}. أدخله هنا:",
        "register_verified": "🎉 تم تفعيل حسابك. سجّل الدخول للمتابعة.",
        "otp_resent": "📨 تم إرسال رمز جديد.",
        # Validation errors
        "error_email": "⚠️ البريد الإلكتروني غير صالح.",
        "error_password": "⚠️ يجب أن تتكون كلمة المرور من 6 أحرف على الأقل.",
        "error_otp": "⚠️ أدخل الرمز المرسل إلى بريدك.",
        "error_name": "⚠️ أدخل اسمًا.",
        "error_price": "⚠️ أدخل سعرًا موجبًا، مثل 250 أو 99.50",
        "error_address": "⚠️ اختر عنوان التوصيل أولًا.",
        "error_payment_method": "⚠️ اختر طريقة الدفع أولًا.",
        "error_description": "⚠️ صف المشكلة في كلمات قليلة.",
        "error_device_category": "⚠️ اختر نوع الجهاز.",
        "error_delivery_method": "⚠️ اختر طريقة التوصيل.",
        "error_status": "⚠️ لا يمكن تعيين هذه الحالة هنا.",
        "error_quantity": "⚠️ كمية غير صالحة.",
        "error_street": "⚠️ أدخل الشارع.",
        "error_city": "⚠️ أدخل المدينة.",
        "error_not_found": "❌ غير موجود. ربما تم حذفه.",
        "error_connection": "📡 تعذر الوصول إلى RepairHub الآن. حاول بعد دقيقة.",
        "error_unexpected": "❌ حدث خطأ ما. حاول مرة أخرى.",
        # Explore
        "explore_title": "🛒 <b>المنتجات</b>",
        "explore_empty": "لا يوجد ما يطابق هذه الفلاتر.",
        "price": "السعر",
        "in_stock": "متوفر: {count}",
        "out_of_stock": "غير متوفر",
        "cart_added": "🧺 تمت الإضافة إلى السلة",
        "condition_all": "الكل",
        "condition_NEW": "جديد",
        "condition_USED": "مستعمل",
        "filter": "الفلتر",
        "filter_all": "الكل",
        "filter_pending": "قيد المراجعة",
        "filter_approved": "مقبول",
        "filter_suspended": "موقوف",
        # Cart and checkout
        "cart_title": "🧺 <b>سلتك</b> ({count} منتجات)",
        "cart_empty": "🧺 سلتك فارغة.",
        "cart_update_failed": "❌ تعذر تحديث السلة. تمت استعادة الكمية السابقة.",
        "total": "الإجمالي",
        "checkout_title": "🧾 <b>ملخص الطلب</b>",
        "checkout_address": "📍 اختر عنوان التوصيل:",
        "checkout_no_address": "📍 لا توجد عناوين محفوظة. أضف عنوانًا من 👤 حسابي أولًا.",
        "checkout_payment": "💳 اختر طريقة الدفع:",
        "checkout_cancelled": "❌ تم إلغاء إتمام الشراء.",
        "order_placed": "✅ تم إنشاء الطلب #{order_id}!",
        "pay_by_card_hint": "💳 استخدم الزر أدناه للدفع بالبطاقة.",
        "payment_start_failed": "⚠️ تعذر بدء الدفع بالبطاقة. تم حفظ طلبك، حاول الدفع مرة أخرى أدناه أو لاحقًا من 📦 طلباتي.",
        "pay_CASH": "💵 نقدًا",
        "pay_CREDIT_CARD": "💳 بطاقة",
        "pay_DEBIT_CARD": "💳 بطاقة خصم",
        "pay_BANK_TRANSFER": "🏦 تحويل بنكي",
        "pay_MOBILE_WALLET": "📱 محفظة إلكترونية",
        # Orders
        "orders_title": "📦 <b>طلباتي</b>",
        "orders_empty": "لا توجد طلبات بعد.",
        "order_title": "📦 <b>الطلب #{order_id}</b>",
        "tracking_title": "🚦 <b>التتبع</b>",
        # Repairs
        "repair_menu": "🛠 <b>إصلاح</b>\n\nاطلب عرض سعر من محل صيانة أو تابع طلباتك.",
        "repair_no_shops": "😔 لا توجد محلات صيانة متاحة الآن.",
        "repair_describe": "✍️ صف مشكلة جهازك:",
        "repair_created": "✅ تم إرسال طلب الإصلاح #{request_id}. سيرد المحل بعرض سعر.",
        "repair_no_quote": "⏳ لم يرسل المحل عرض سعر بعد.",
        "repair_quote_accepted": "✅ تم قبول العرض.",
        "repair_quote_hint": "💬 أرسل المحل عرض سعر. اقبله لاختيار التوصيل والدفع.",
        "repair_title": "🛠 <b>طلب الإصلاح #{request_id}</b>",
        "repairs_title": "🛠 <b>طلبات الإصلاح</b>",
        "repairs_empty": "لا توجد طلبات إصلاح بعد.",
        "quote": "عرض السعر",
        "device_MOBILE": "📱 موبايل",
        "device_LAPTOP": "💻 لابتوب",
        "device_TABLET": "📲 تابلت",
        "device_DESKTOP": "🖥 كمبيوتر مكتبي",
        "device_TV": "📺 تلفزيون",
        "device_OTHER": "🔧 أخرى",
        "delivery_HOME_DELIVERY": "🚚 توصيل للمنزل",
        "delivery_SHOP_VISIT": "🏪 سأزور المحل",
        "delivery_PICKUP": "📦 استلام بواسطة مندوب",
        "wizard_step": "الخطوة {index}/{total}: <b>{title}</b>",
        "wizard_device_type": "نوع الجهاز",
        "wizard_select_shop": "المحل",
        "wizard_describe": "المشكلة",
        "wizard_delivery_address": "التوصيل والعنوان",
        "wizard_payment_method": "الدفع",
        # Offers
        "offers_title": "🔥 <b>العروض</b>",
        "offers_empty": "لا توجد عروض نشطة الآن.",
        "offer_until": "حتى {date}",
        # Account
        "account_profile": "👤 <b>{name}</b>\n📧 {email}\n📞 {phone}",
        "addresses_title": "📍 <b>عناويني</b>",
        "addresses_empty": "لا توجد عناوين محفوظة بعد.",
        "address_street": "🏠 أدخل الشارع والمبنى:",
        "address_city": "🏙 أدخل المدينة:",
        "address_saved": "✅ تم حفظ العنوان: {address}",
        # Notifications
        "notifications_title": "🔔 <b>الإشعارات</b>",
        "notifications_empty": "لا توجد إشعارات.",
        # Shop
        "shop_dashboard_title": "📊 <b>لوحة تحكم المحل</b>",
        "subscription": "الاشتراك",
        "pending_orders": "طلبات قيد الانتظار",
        "unread_notifications": "إشعارات غير مقروءة",
        "low_stock_title": "⚠️ <b>مخزون منخفض</b>",
        "shop_offers_title": "🔥 <b>عروضي</b>",
        "shop_quote_prompt": "💰 أدخل عرض السعر للطلب #{request_id} بعملة {currency}:",
        "quote_sent": "✅ تم إرسال عرض السعر.",
        # Delivery and assigner
        "jobs_avail_title": "📋 <b>متاح: {kind}</b>",
        "jobs_mine_title": "🚚 <b>مهامي: {kind}</b>",
        "jobs_queue_title": "🧭 <b>بانتظار التوزيع: {kind}</b>",
        "job_kind_orders": "الطلبات",
        "job_kind_repair": "الإصلاحات",
        "jobs_empty": "لا يوجد شيء هنا الآن.",
        "job_update": "🚚 حدّث حالة المهمة #{job_id}:",
        "my_deliveries": "🚚 أي المهام تريد عرضها؟",
        "choose_courier": "👤 اختر مندوب التوصيل لـ #{job_id}:",
        "no_couriers": "😔 لا يوجد مندوبو توصيل متاحون.",
        "assign_log_title": "📜 <b>سجل التوزيع</b>",
        "assign_log_empty": "لا توجد عمليات توزيع بعد.",
        # Admin
        "admin_dashboard_title": "📊 <b>لوحة تحكم المدير</b>",
        "admin_kind_shops": "🏪 المحلات",
        "admin_kind_users": "👥 المستخدمون",
        "admin_kind_deliveries": "🚚 المندوبون",
        "admin_kind_assigners": "🧭 الموزّعون",
        "admin_kind_orders": "📦 الطلبات",
        "admin_kind_repairs": "🛠 الإصلاحات",
        "moderation_title": "<b>{kind}</b>",
        "moderation_empty": "لا يوجد ما يطابق هذا الفلتر.",
        "admin_search_prompt": "🔍 أدخل اسمًا أو بريدًا أو هاتفًا:",
        "admin_search_applied": "🔍 تم تطبيق البحث.",
        "admin_action_done": "✅ تم للعنصر #{item_id}",
        "admin_delete_confirm": "🗑 حذف {kind} #{item_id}؟ لا يمكن التراجع عن ذلك.",
        "finance_title": "💰 <b>التقرير المالي</b>",
        "finance_total": "المعاملات",
        "finance_revenue": "الإيرادات",
        "finance_user_title": "👤 <b>معاملات المستخدم</b>",
        # Pagination
        "page_footer": "صفحة {page}/{pages} · الإجمالي {total}",
        # Statuses
        "status_PENDING": "قيد الانتظار",
        "status_CONFIRMED": "مؤكد",
        "status_PROCESSING": "قيد التجهيز",
        "status_FINISHPROCESSING": "جاهز",
        "status_SHIPPED": "تم الشحن",
        "status_DELIVERED": "تم التوصيل",
        "status_CANCELLED": "ملغي",
        "status_SUBMITTED": "تم الإرسال",
        "status_QUOTE_PENDING": "جارٍ إعداد العرض",
        "status_QUOTE_SENT": "تم إرسال العرض",
        "status_QUOTE_APPROVED": "تم قبول العرض",
        "status_QUOTE_REJECTED": "تم رفض العرض",
        "status_DEVICE_COLLECTED": "تم استلام الجهاز",
        "status_REPAIRING": "قيد الإصلاح",
        "status_REPAIR_COMPLETED": "اكتمل الإصلاح",
        "status_DEVICE_DELIVERED": "تم تسليم الجهاز",
        "status_FAILED": "فشل",
        "status_ASSIGNED": "تم التعيين",
        "status_PICKED_UP": "تم الاستلام",
        "status_IN_TRANSIT": "في الطريق",
        "status_APPROVED": "مقبول",
        "status_SUSPENDED": "موقوف",
        "status_SUCCESS": "ناجحة",
    },
}

DEFAULT_LANG = "en"


def get_text(lang: str, key: str, **kwargs) -> str:
    """Get a text in the requested language, formatted with ``kwargs``.

    Args:
        lang: Language code ('en' or 'ar')
        key: Key in TEXTS
        **kwargs: Values for the placeholders

    Returns:
        The formatted text; English when the language lacks the key, and the
        key itself when no language has it.
    """
    texts = TEXTS.get(lang, TEXTS[DEFAULT_LANG])
    text = texts.get(key)
    if text is None:
        text = TEXTS[DEFAULT_LANG].get(key)
    if text is None:
        return key

    if kwargs:
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.warning("Format error in get_text: %s, key=%s, lang=%s", e, key, lang)
    return text


def get_language_name(lang: str) -> str:
    """Display name of a language."""
    return LANGUAGES.get(lang, LANGUAGES[DEFAULT_LANG])


def status_label(lang: str, status: str | None) -> str:
    """Localized order, repair, delivery or account status."""
    value = (status or "").strip().upper()
    if not value:
        return "-"
    key = f"status_{value}"
    text = get_text(lang, key)
    if text == key:
        return value.replace("_", " ").title()
    return text


def button_texts(key: str) -> frozenset[str]:
    """Every translation of a reply-menu button, for ``F.text.in_(...)`` filters."""
    return frozenset(texts[key] for texts in TEXTS.values() if key in texts)
