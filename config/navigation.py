"""
Page script paths used with st.switch_page / st.page_link.
"""

LOGIN_PAGE = "pages/1_🔐_Login.py"
REGISTER_PAGE = "pages/2_📝_Register.py"
ORDERS_PAGE = "pages/3_🔧_Orders.py"
INVENTORY_PAGE = "pages/4_📦_Inventory.py"
PAY_PAGE = "pages/5_💳_Pay.py"
